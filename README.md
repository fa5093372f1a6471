# cpoker

A small five-card poker dealer. It builds a 52-card deck and shuffles it. It deals
a hand of five and sorts it by suit and then by number. It then names the poker
hand the cards make and gives the ranks that decide it.

## Installation

```
pip install .
```

## Command line

```
cpoker
```

The command takes no options apart from `--help`. Each run prints the sorted hand
and its evaluation, for example:

```
H:3 D:3 C:9 S:3 S:9
Full house (rank: 3,9)
```

Cards print as `SUIT:NUMBER`. The suits are `H`, `D`, `C` and `S`. The numbers are
`A`, `2` … `10`, `J`, `Q`, `K`. In the ranks an ace counts high and prints as `A`.
Ranks are listed in ascending card order, except for two pair, where the higher
pair comes first.

## Library use

Everything lives in `cpoker.card`:

```python
import random

from cpoker.card import Deck, evaluate, format_cards, format_status, sort_cards

deck = Deck(random.Random(42))
deck.shuffle(100)
hand = sort_cards(deck.draw_hand())

print(format_cards(hand))
status = evaluate(hand)
print(format_status(status))
print(status.hand, status.ranks)
```

- `Card(suit, number)` is an immutable card. `suit` is a `Suit` (`HEART`, `DIAMOND`,
  `CLUB`, `SPADE`) and `number` runs from 1 (ace) to 13 (king). Anything else
  raises `ValueError`.
- `Deck(rng=None)` holds the 52 cards. Pass a `random.Random` for repeatable
  shuffles. `len(deck)` tells how many cards are left, and iterating goes from the
  top down. `shuffle(n)` moves a randomly chosen card to the top `n` times.
  `draw()` takes the top card. `draw_hand()` takes five. Either raises
  `EmptyDeckError` (an `IndexError`) when the deck holds too few cards.
- `sort_cards` returns the cards ordered by suit, then by number
  (`Card.sort_key`).
- `evaluate` takes exactly five distinct cards and returns a `Status`. It holds a
  `Hand` (`NO_PAIR` up to `ROYAL_FLUSH`) and a tuple of `ranks`. Any other number
  of cards, or a repeated card, raises `ValueError`.
- `format_cards` and `format_status` (or `str(status)`) produce the text that the
  command prints.

## What it does not do

It deals and evaluates one hand for one player. It does not do betting, play
against other players, compare two hands, or keep any state between runs.

## Running the tests

```
pip install .[test]
pytest
```