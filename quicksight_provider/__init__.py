# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""QuickSight Group resource provider.

Manages ``aws_quicksight_group`` resources through create, read, update,
delete and import lifecycle operations backed by the QuickSight API.
"""

__version__ = "0.1.0"
