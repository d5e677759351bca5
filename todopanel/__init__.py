"""
TODO Panel Application Package
==============================

Package principal du panneau TODO/FIXME:
- config: configuration (environnement + fichier YAML)
- logging: logger adapté au texte scanné
- services: navigation et télémétrie
- controllers: état du panneau et coordinateur
- workers: scans en arrière-plan (QThread)
- widgets, views: interface PySide6
- lifecycle: démarrage et arrêt
- cli: interface en ligne de commande
"""

__version__ = "1.0.0"
