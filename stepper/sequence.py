"""Compile a list of step actions into one frozen continuation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Optional

from .errors import SequenceExhausted
from .protocol import StepAction, action_name, check_step_arity

logger = logging.getLogger(__name__)

Chain = Callable[..., Any]


def _noop_reject(payload: Any = None) -> None:
    return None


@dataclass(frozen=True)
class ChainContext:
    """Context passed to every action of a compiled chain.

    Only ``next`` and ``reject`` are available: a compiled chain cannot be
    edited or rewound.
    """

    next: Chain
    reject: Callable[[Any], Any]


def sequence(
    actions: Iterable[StepAction],
    on_reject: Optional[Callable[[Any], Any]] = None,
    *,
    check_arity: bool = True,
) -> Chain:
    """Link *actions* right-to-left into a single callable ``chain(payload)``.

    Calling the chain invokes the first action as
    ``action(ChainContext(next, reject), payload, is_last)``.  Each
    ``context.next(payload)`` invokes the following action; ``is_last`` is
    true only for the final one, whose ``next`` raises ``SequenceExhausted``.
    ``context.reject(payload)`` calls *on_reject* and nothing else.

    The action list is copied, so the chain is unaffected by later changes to
    whatever it was built from.  There is no reentrancy protection: calling
    ``next`` twice from one step runs the remainder of the chain twice.

    With no actions the chain returns immediately without calling anything.
    """
    actions = list(actions)
    reject = on_reject if on_reject is not None else _noop_reject
    if check_arity:
        for action in actions:
            check_step_arity(action)

    if not actions:

        def empty_chain(payload: Any = None) -> None:
            logger.debug("sequence: empty chain, nothing to run")

        return empty_chain

    def terminal(payload: Any = None) -> None:
        raise SequenceExhausted(
            'Steps executing are ended. You cannot call "next" method.'
        )

    last = len(actions) - 1
    chain: Chain = terminal
    for index in range(last, -1, -1):
        chain = _link(actions[index], chain, reject, index, index == last)
    return chain


def _link(
    action: StepAction,
    following: Chain,
    reject: Callable[[Any], Any],
    index: int,
    is_last: bool,
) -> Chain:
    context = ChainContext(next=following, reject=reject)
    name = action_name(action)

    def run(payload: Any = None) -> Any:
        logger.debug("sequence: step %d (%s), is_last=%s", index, name, is_last)
        return action(context, payload, is_last)

    return run
