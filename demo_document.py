#!/usr/bin/env python3
"""
Demo: Build an example LaTeX document.

Prints the generated markup and saves it next to the preamble as YAML.
"""

import logging

from texbuilder.backends import save_document
from texbuilder.examples import build_example_document, build_example_preamble
from texbuilder.serialization import preamble_to_yaml


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    builder = build_example_document(rows=4)

    print("=" * 80)
    print("TEXBUILDER DEMO")
    print("=" * 80)
    print(builder.build_document())

    print("PREAMBLE AS YAML:")
    print("-" * 80)
    print(preamble_to_yaml(build_example_preamble()))

    save_document(builder, "example.tex")
    print("\n" + "=" * 80)
    print("To compile:")
    print("  pdflatex example.tex")
    print("=" * 80)


if __name__ == "__main__":
    main()
