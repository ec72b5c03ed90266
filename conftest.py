# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

"""
Root-level conftest.py for pytest plugin loading.

In pytest 8.4+, pytest_plugins must be defined at the rootdir conftest.py level,
not in subdirectory conftest files.
"""

pytest_plugins = ["tests.unit.fixtures"]
