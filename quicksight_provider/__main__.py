# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""
Allow running the provider command line as a Python module.

Usage:
    python -m quicksight_provider create analysts --group-name analysts
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
