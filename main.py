#!/usr/bin/env python3
"""
TODO Panel - point d'entrée de l'interface graphique
====================================================

Ouvre un éditeur minimal avec le panneau TODO/FIXME ancré à droite.
"""

import sys

from todopanel.views.main_window import run

if __name__ == "__main__":
    sys.exit(run())
