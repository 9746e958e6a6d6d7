"""Tests du choix du collecteur selon l'identifiant du système."""

import pytest

from smoke_sysinfo.collectors.generic import GenericCollector
from smoke_sysinfo.collectors.platform.aix import AIXCollector
from smoke_sysinfo.collectors.platform.bsd import BSDCollector
from smoke_sysinfo.collectors.platform.hpux import HPUXCollector
from smoke_sysinfo.collectors.platform.irix import IRIXCollector
from smoke_sysinfo.collectors.platform.linux import LinuxCollector
from smoke_sysinfo.collectors.platform.solaris import SolarisCollector
from smoke_sysinfo.collectors.platform.windows import WindowsCollector
from smoke_sysinfo.core.probe import detect_os_name, select_collector


@pytest.mark.parametrize("os_name, expected", [
    ("aix", AIXCollector),
    ("AIX", AIXCollector),
    ("darwin", BSDCollector),
    ("Darwin", BSDCollector),
    ("freebsd", BSDCollector),
    ("OpenBSD", BSDCollector),
    ("hpux", HPUXCollector),
    ("HP-UX", HPUXCollector),
    ("linux", LinuxCollector),
    ("Linux", LinuxCollector),
    ("irix", IRIXCollector),
    ("IRIX64", IRIXCollector),
    ("solaris", SolarisCollector),
    ("SunOS", SolarisCollector),
    ("dec_osf", SolarisCollector),
    ("OSF1", SolarisCollector),
    ("cygwin", WindowsCollector),
    ("CYGWIN_NT-10.0", WindowsCollector),
    ("MSWin32", WindowsCollector),
    ("Windows", WindowsCollector),
])
def test_known_platforms(os_name, expected):
    assert select_collector(os_name) is expected


@pytest.mark.parametrize("os_name", ["vms", "haiku", "os2", "", None])
def test_unknown_platform_falls_back_to_generic(os_name):
    assert select_collector(os_name) is GenericCollector


def test_first_match_wins():
    # "aix" est testé avant "linux"
    assert select_collector("aix-on-linux") is AIXCollector
    # "bsd" est testé avant "windows"
    assert select_collector("bsd-windows") is BSDCollector


def test_selection_is_deterministic():
    assert {select_collector("SunOS") for _ in range(5)} == {SolarisCollector}


def test_detect_os_name_uses_platform_system(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "SunOS")
    assert detect_os_name() == "SunOS"


def test_detect_os_name_falls_back_to_sys_platform(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "")
    monkeypatch.setattr("sys.platform", "hp-ux11")
    assert detect_os_name() == "hp-ux11"
