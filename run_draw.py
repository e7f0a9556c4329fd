#!/usr/bin/env python3
"""Runner mínimo para el sorteo sin instalar el paquete.

Ejemplo:
  python run_draw.py participants.txt 3 --seed 42

"""
import sys

from winners.cli import main

if __name__ == '__main__':
    sys.exit(main())
