#!/usr/bin/env python3
"""Sort a small container of words with a binary search tree.

Fills a tree from a fixed list, prints the words in sorted order, looks
every word up, deletes one and prints what is left.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import Tree, TreeError


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    container = ["delta", "bravo", "charlie", "echo", "alpha"]
    print("Container:", container)

    tree = Tree()
    for word in container:
        tree.insert(word, word.upper())

    sorted_words = []
    tree.traverse(lambda node: sorted_words.append(node.key))
    print("Sorted container:", sorted_words)

    print("Find by key:", end=" ")
    for word in container:
        payload, found = tree.find(word)
        print(payload if found else "<missing>", end=" ")
    print()

    try:
        tree.delete("bravo")
        tree.delete("zulu")
    except TreeError as e:
        logging.getLogger(__name__).warning("Delete failed: %s", e)

    print("After deleting 'bravo':", list(tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())
