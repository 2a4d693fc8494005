#!/usr/bin/env python3
"""
Section Words
Counts the most frequent words in one section of a web page
"""

import sys

from sectionwords.cli import main

if __name__ == "__main__":
    try:
        status = main()
    except KeyboardInterrupt:
        print("\n🛑 Stopped by user")
        sys.exit(130)
    except ValueError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
    sys.exit(status)
