# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Jeff Culverhouse
import sys

from .app import main

sys.exit(main())
