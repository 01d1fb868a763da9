"""
Intcode VM - Noun/Verb Parameter Search

The day 2 program reads its two parameters from mem[1] (noun) and
mem[2] (verb) and leaves its result in mem[0]. The search runs a fresh
machine for every pair until the result matches the target.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .emu import execute

logger = logging.getLogger(__name__)

DEFAULT_TARGET = 19690720
PARAMETER_RANGE = range(100)


def set_parameters(program: Sequence[int], noun: int, verb: int) -> List[int]:
    """Copy of program with mem[1] = noun and mem[2] = verb."""
    memory = list(program)
    memory[1] = noun
    memory[2] = verb
    return memory


def find_noun_verb(program: Sequence[int], target: int = DEFAULT_TARGET,
                   nouns: Iterable[int] = PARAMETER_RANGE,
                   verbs: Iterable[int] = PARAMETER_RANGE) -> Optional[Tuple[int, int]]:
    """First (noun, verb) pair, noun-major, whose run returns target.

    Returns None when no pair matches. Machine faults propagate.
    """
    verbs = list(verbs)
    runs = 0
    for noun in nouns:
        for verb in verbs:
            runs += 1
            if execute(set_parameters(program, noun, verb)) == target:
                logger.info("found noun=%d verb=%d after %d run(s)", noun, verb, runs)
                return noun, verb
        logger.debug("noun %d: no match", noun)
    logger.info("no noun/verb pair produces %d (%d runs)", target, runs)
    return None


def search_answer(noun: int, verb: int) -> int:
    """Combine a pair into the single reported number."""
    return 100 * noun + verb
