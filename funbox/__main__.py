# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .scripts.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
