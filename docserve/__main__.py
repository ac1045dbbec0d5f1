#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Allows running the server with ``python -m docserve``.
"""

import sys

from .cli import main

sys.exit(main())
