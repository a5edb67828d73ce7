#!/usr/bin/env python3

from .main import run

if __name__ == "__main__":
    run()
