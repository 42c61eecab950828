"""
Experiment harness core primitives.

- autosolve:    solve for one known answer with a ranking heuristic, no entropy.
- play_session: drive a GameSession (entropy ranking by default) with
                ground-truth feedback for one known answer.
- run_batch:    autosolve every target independently, fanned out over a
                process pool.

Results are plain dicts so a CLI, a notebook or a CSV writer can consume them:
    answer, success, guesses, path, time_ms  (+ outcomes for play_session)

Running out of candidates is an expected outcome for answers outside the
dictionary; it is reported as success=False with the path so far.
"""

from __future__ import annotations

import functools
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, Iterable, List, Sequence

from tqdm import tqdm

from wordle_info.engine import filter_candidates, score
from wordle_info.game import GameSession, InconsistentFeedbackError, SessionState
from wordle_info.solvers import create_solver

logger = logging.getLogger(__name__)


def autosolve(dictionary: Iterable[str], answer: str, *, solver_id: str = "positional_freq") -> Dict:
    """
    Repeatedly guess the top-ranked candidate until it is `answer`.

    Each round: rank the candidates, guess the first one, score it against the
    answer, and keep only candidates consistent with that feedback. A wrong
    guess never survives its own feedback, so every round shrinks the list.

    Args:
        dictionary: starting candidates (words of other lengths are ignored)
        answer:     the hidden word
        solver_id:  ranking heuristic (any registered solver)

    Returns:
        dict with keys: answer, success, guesses, path, time_ms
    """
    answer = answer.strip().lower()
    N = len(answer)
    candidates = [w for w in dictionary if len(w) == N]

    solver = create_solver(solver_id)
    solver.reset(N=N)

    path: List[str] = []
    success = False
    t0 = time.perf_counter()
    while True:
        guess = solver.next_guess(candidates)
        if guess is None:
            logger.info("ran out of candidates looking for %r (not in the dictionary?)", answer)
            break
        path.append(guess)
        if guess == answer:
            success = True
            break
        candidates = filter_candidates(candidates, score(guess, answer))

    return {
        "answer": answer,
        "success": success,
        "guesses": len(path),
        "path": path,
        "time_ms": (time.perf_counter() - t0) * 1000.0,
    }


def play_session(session: GameSession, answer: str, *, strategy: str = "entropy",
                 max_turns: int | None = None) -> Dict:
    """
    Play `session` against a known answer, feeding it ground-truth patterns.

    Each turn ranks the candidates with `strategy`, guesses the top one,
    records its feedback and evaluates it. Stops when the guess is the answer,
    when `max_turns` guesses have been made, or when the feedback leaves no
    candidate (success=False).

    Returns:
        dict with keys: answer, success, guesses, path, time_ms, outcomes
    """
    answer = answer.strip().lower()
    t0 = time.perf_counter()
    success = False

    try:
        while session.state is not SessionState.EXHAUSTED:
            if max_turns is not None and len(session.path) >= max_turns:
                break
            if session.state is SessionState.ACTIVE:
                session.prioritize(strategy)
            guess = session.possible_words()[0]
            session.add_feedback(score(guess, answer))
            session.evaluate_information(guess)
            if guess == answer:
                success = True
                break
    except InconsistentFeedbackError as e:
        logger.info("%s", e)

    return {
        "answer": answer,
        "success": success,
        "guesses": len(session.path),
        "path": session.path,
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "outcomes": list(session.history),
    }


def _autosolve_one(dictionary: List[str], solver_id: str, answer: str) -> Dict:
    return autosolve(dictionary, answer, solver_id=solver_id)


def run_batch(
        dictionary: Sequence[str],
        targets: Sequence[str] | None = None,
        *,
        solver_id: str = "positional_freq",
        workers: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Autosolve each target (default: every dictionary word) independently.

    Runs are independent, so they are spread over a process pool; results come
    back in `targets` order. workers=1 runs everything in-process.
    """
    dictionary = list(dictionary)
    targets = list(dictionary if targets is None else targets)
    if workers is None:
        workers = os.cpu_count() or 1

    job = functools.partial(_autosolve_one, dictionary, solver_id)
    if workers <= 1 or len(targets) < 2:
        iterator = tqdm(targets, ncols=80, desc=solver_id, unit="game") if progress else targets
        return [job(t) for t in iterator]

    chunksize = max(1, len(targets) // (workers * 8))
    logger.info("autosolving %d targets on %d workers (chunksize %d)", len(targets), workers, chunksize)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        results = executor.map(job, targets, chunksize=chunksize)
        if progress:
            results = tqdm(results, total=len(targets), ncols=80, desc=solver_id, unit="game")
        return list(results)
