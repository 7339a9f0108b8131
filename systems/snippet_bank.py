"""
Snippet catalog and level-gated selection.

The catalog order matters: the first entries are the beginner tier and the
eligible window widens as the level goes up, so a higher level always sees a
superset of what a lower level sees.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence
import random


@dataclass(frozen=True)
class Snippet:
    """
    A single typing challenge.

    - text: the exact characters the player has to type (case-sensitive)
    - hint: short description shown under the snippet
    """
    text: str
    hint: str

    def __post_init__(self):
        if not self.text:
            raise ValueError("Snippet text must not be empty")


SNIPPETS: List[Snippet] = [
    # Beginner JS
    Snippet("for(let i=0; i<5; i++) { console.log(i); }", "This is a for loop."),
    Snippet("let x = 10;", "Variable declaration."),
    Snippet('if(x > 5) { alert("Hi!"); }', "Simple if statement."),
    Snippet('function greet(name) { return "Hello, " + name; }', "Function definition."),
    # Beginner HTML
    Snippet("<h1>Hello World</h1>", "HTML heading."),
    Snippet("<button>Click me</button>", "HTML button."),
    # Beginner CSS
    Snippet("body { background: #222; }", "CSS body background."),
    Snippet("color: #00ffe7;", "CSS color property."),
    # Intermediate
    Snippet("const arr = [1,2,3].map(x => x*2);", "Array map method."),
    Snippet('document.querySelector("#id")', "DOM selector."),
    Snippet("ul > li.selected", "CSS selector."),
    # Advanced
    Snippet("try { risky(); } catch(e) { console.error(e); }", "Try-catch block."),
    Snippet("class Knight { constructor(name) { this.name = name; } }", "ES6 class."),
    Snippet('input[type="text"]:focus { outline: none; }', "CSS pseudo-class."),
]

# (level below which the window applies, window size)
BEGINNER_TIER = (3, 6)
INTERMEDIATE_TIER = (5, 10)


def tier_window(level: int, catalog_size: int) -> int:
    """Number of leading catalog entries eligible at this level."""
    for max_level, size in (BEGINNER_TIER, INTERMEDIATE_TIER):
        if level < max_level:
            return min(size, catalog_size)
    return catalog_size


def eligible_snippets(level: int, catalog: Optional[Sequence[Snippet]] = None) -> Sequence[Snippet]:
    """Return the slice of the catalog a player at `level` can be given."""
    if catalog is None:
        catalog = SNIPPETS
    return catalog[:tier_window(level, len(catalog))]


def select_snippet(
    level: int,
    rng: Optional[random.Random] = None,
    catalog: Optional[Sequence[Snippet]] = None,
) -> Snippet:
    """
    Draw a snippet uniformly from the window eligible at `level`.

    Args:
        level: Current battle level (1+)
        rng: Random source; pass a seeded random.Random for reproducible picks
        catalog: Override catalog (defaults to SNIPPETS)
    """
    rng = rng or random
    return rng.choice(eligible_snippets(level, catalog))
