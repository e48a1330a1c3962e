#!/usr/bin/env python3
"""Resolve a URL template from key=value pairs and send it through httpi."""

from __future__ import annotations

from httpi.cli import main

if __name__ == "__main__":
    main()
