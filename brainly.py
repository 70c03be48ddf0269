#!/usr/bin/env python3
"""
Second brain: save YouTube/Twitter links and notes, then ask questions about them.

Usage:
    python brainly.py add https://youtu.be/dQw4w9WgXcQ --title "Eiffel" --description "favorite"
    python brainly.py note add "Trip" "Paris in June"
    python brainly.py list
    python brainly.py ask "What did I save about Paris?"
    python brainly.py health
    python brainly.py share            # print (or create) the share hash
    python brainly.py shared <hash>    # read-only view of shared content
"""

from secondbrain.cli import main

if __name__ == "__main__":
    main()
