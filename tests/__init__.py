# Unitrent Test Suite
# Copyright 2024 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unitrent test suite.

Unit tests for the calendar primitives, rent-change schedule, rent-change
applier, first-payment proration and the full rent calculation.
"""
