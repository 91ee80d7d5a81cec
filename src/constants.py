# -*- coding: utf-8 -*-
from typing import List, Tuple

# Search strategies for the character multiset.
# "copy" hands every branch its own Counter; "backtrack" mutates one
# Counter in place and restores it after each descent.
STRATEGY_COPY = "copy"
STRATEGY_BACKTRACK = "backtrack"
STRATEGIES: Tuple[str, ...] = (STRATEGY_COPY, STRATEGY_BACKTRACK)
DEFAULT_STRATEGY = STRATEGY_COPY

# Zero keeps every dictionary word, the empty word included.
DEFAULT_MIN_LENGTH = 0

# Words per row when printing results.
RESULT_COLUMNS = 5

# How the empty word is shown when printing results.
EMPTY_WORD_LABEL = '""'

# Fallback dictionary used when no word list can be read.
BASIC_WORDS: List[str] = """
ate eat tea tee eta tae
dog do god goo go good
act cat tac arc car rat tar art
ear era are eye dye yes sea see
lime mile smile slime limes miles
note tone onset stone notes tones
post stop spot tops pots opts
""".split()
