from __future__ import annotations
import logging
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .cards import Card, full_deck, parse_cards, remaining
from .errors import (
    DeckExhaustionError,
    DuplicateCardError,
    IncompleteHandError,
    InvalidBoardError,
    InvalidParameterError,
)
from .evaluator import best_of, compare

log = logging.getLogger(__name__)

BOARD_SIZE = 5
HOLE_SIZE = 2
MIN_OPPONENTS = 1
MAX_OPPONENTS = 8
DEFAULT_ITERATIONS = 4000

WIN, TIE, LOSS = 0, 1, 2


@dataclass(frozen=True)
class EquityResult:
    win: float
    tie: float
    lose: float
    wins: int
    ties: int
    losses: int
    iterations: int

    @staticmethod
    def from_counts(wins: int, ties: int, losses: int) -> "EquityResult":
        n = wins + ties + losses
        return EquityResult(
            win=wins / n * 100,
            tie=ties / n * 100,
            lose=losses / n * 100,
            wins=wins,
            ties=ties,
            losses=losses,
            iterations=n,
        )

    @property
    def equity(self) -> float:
        """Pot share in percent, a tie counted as half a win."""
        return self.win + self.tie / 2

    def as_dict(self) -> Dict[str, float]:
        return {"win": self.win, "tie": self.tie, "lose": self.lose}


@dataclass(frozen=True)
class SimulationInput:
    hero: Tuple[Card, Card]
    board: Tuple[Card, ...]
    opponents: int
    iterations: int
    deck: Tuple[Card, ...]  # full deck minus hero and board


def _check_int(name: str, value: object, lo: int, hi: Optional[int] = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value < lo or (hi is not None and value > hi):
        bound = f"[{lo}, {hi}]" if hi is not None else f">= {lo}"
        raise InvalidParameterError(f"{name} must be {bound}, got {value}")
    return value


def prepare(
    hero_cards: Iterable[Union[str, Card]],
    board_cards: Iterable[Union[str, Card]],
    opponents: int,
    iterations: int,
) -> SimulationInput:
    """
    Parse and validate a simulation request. Raises one of the typed
    errors in .errors; nothing here is retried or recovered.
    """
    hero = parse_cards(hero_cards)
    board = parse_cards(board_cards)

    if len(hero) != HOLE_SIZE:
        raise IncompleteHandError(len(hero))
    if len(board) > BOARD_SIZE:
        raise InvalidBoardError(f"Board must be 0..{BOARD_SIZE} cards, got {len(board)}")

    known = hero + board
    if len(set(known)) != len(known):
        seen = set()
        dups = []
        for c in known:
            if c in seen and c.code not in dups:
                dups.append(c.code)
            seen.add(c)
        raise DuplicateCardError(dups)

    _check_int("opponents", opponents, MIN_OPPONENTS, MAX_OPPONENTS)
    _check_int("iterations", iterations, 1)

    deck = remaining(full_deck(), known)
    needed = opponents * HOLE_SIZE + (BOARD_SIZE - len(board))
    if needed > len(deck):
        raise DeckExhaustionError(needed, len(deck))

    return SimulationInput(
        hero=(hero[0], hero[1]),
        board=tuple(board),
        opponents=opponents,
        iterations=iterations,
        deck=tuple(deck),
    )


def run_trial(
    hero: Sequence[Card],
    board: Sequence[Card],
    opponents: int,
    deck: Sequence[Card],
    rng: random.Random,
) -> int:
    """One random deal. Returns WIN, TIE or LOSS from the hero's side."""
    buf = list(deck)  # owned by this trial
    rng.shuffle(buf)

    opp_hands = []
    for _ in range(opponents):
        opp_hands.append((buf.pop(), buf.pop()))

    runout = list(board)
    while len(runout) < BOARD_SIZE:
        runout.append(buf.pop())

    hero_rank = best_of(list(hero) + runout)

    tied = False
    for h in opp_hands:
        diff = compare(hero_rank, best_of(list(h) + runout))
        if diff < 0:
            return LOSS
        if diff == 0:
            tied = True
    return TIE if tied else WIN


def _tally(sim: SimulationInput, iterations: int, rng: random.Random) -> Tuple[int, int, int]:
    counts = [0, 0, 0]
    for _ in range(iterations):
        counts[run_trial(sim.hero, sim.board, sim.opponents, sim.deck, rng)] += 1
    return counts[WIN], counts[TIE], counts[LOSS]


def _run_chunk(args: Tuple[SimulationInput, int, int]) -> Tuple[int, int, int]:
    sim, iterations, seed = args
    return _tally(sim, iterations, random.Random(seed))


def split_iterations(iterations: int, workers: int) -> List[int]:
    base, extra = divmod(iterations, workers)
    chunks = [base + (1 if i < extra else 0) for i in range(workers)]
    return [c for c in chunks if c > 0]


def simulate(
    hero_cards: Iterable[Union[str, Card]],
    board_cards: Iterable[Union[str, Card]] = (),
    opponents: int = MIN_OPPONENTS,
    iterations: int = DEFAULT_ITERATIONS,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    workers: int = 1,
) -> EquityResult:
    sim = prepare(hero_cards, board_cards, opponents, iterations)
    _check_int("workers", workers, 1)
    if rng is None:
        rng = random.Random(seed)

    log.debug(
        "simulate hero=%s board=%s opponents=%d iterations=%d workers=%d",
        " ".join(map(str, sim.hero)),
        " ".join(map(str, sim.board)) or "-",
        sim.opponents,
        sim.iterations,
        workers,
    )

    if workers == 1:
        wins, ties, losses = _tally(sim, sim.iterations, rng)
    else:
        chunks = split_iterations(sim.iterations, workers)
        jobs = [(sim, n, rng.getrandbits(64)) for n in chunks]
        log.debug("split %d iterations into chunks %s", sim.iterations, chunks)
        wins = ties = losses = 0
        with ProcessPoolExecutor(max_workers=len(jobs)) as ex:
            for w, t, l in ex.map(_run_chunk, jobs):
                wins += w
                ties += t
                losses += l

    assert wins + ties + losses == sim.iterations
    result = EquityResult.from_counts(wins, ties, losses)
    log.debug("result win=%.2f tie=%.2f lose=%.2f", result.win, result.tie, result.lose)
    return result
