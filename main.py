"""
main.py

Starts the interactive assistant on the bundled sample dictionary.
Pass -h for dictionary, word length and worker options.
"""

from wordle_assist.shell import main


if __name__ == "__main__":
    main()
