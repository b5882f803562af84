# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Pure solver domain: matrix, pivot selection, elimination, error estimate."""
