#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
docserve
--------
Runs the static-file server from a source checkout.
"""

import sys

from docserve.cli import main


if __name__ == '__main__':
    sys.exit(main())
