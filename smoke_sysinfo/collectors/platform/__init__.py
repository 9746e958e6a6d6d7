"""
Package des collecteurs spécifiques par plateforme

Ce package contient les collecteurs qui utilisent les outils
propres à chaque système d'exploitation :
- AIX (lsdev, lsattr)
- BSD et macOS (sysctl)
- HP-UX (ioscan)
- IRIX (hinv)
- Linux (/proc/cpuinfo)
- Solaris (psrinfo)
- Windows (variables d'environnement)
"""
