#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Lay out warehouse location codes as a slot map.
"""

import warehouse_slot_map.cli


if __name__ == "__main__":
	warehouse_slot_map.cli.main()
