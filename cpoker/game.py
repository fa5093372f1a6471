"""Deal one shuffled poker hand and report what it is."""

from __future__ import annotations

import argparse

from cpoker.card import Deck, evaluate, format_cards, format_status, sort_cards

SHUFFLES = 100


def main(argv: list[str] | None = None) -> int:
    """Shuffle a deck, draw a hand and print it with its evaluation."""
    parser = argparse.ArgumentParser(
        prog="cpoker", description="Deal a five-card poker hand."
    )
    parser.parse_args(argv)

    deck = Deck()
    deck.shuffle(SHUFFLES)
    hand = sort_cards(deck.draw_hand())
    status = evaluate(hand)

    print(format_cards(hand))
    print(format_status(status))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())