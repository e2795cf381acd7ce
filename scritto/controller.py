"""
The grouping controller

A :class:`GroupingController` keeps track of the position within a rhythmic
structure. It holds a stack of the groupings currently active, from the
outermost (a measure, a region) to the innermost (a beat), each with the
time left to consume, and a queue of top-level groupings not yet entered.

Consuming time depletes every level of the stack by the same amount. Whenever
the innermost grouping is exhausted the controller advances: the exhausted
grouping is popped, and the controller descends into the next subdivision of
its parent or, if the stack is empty, enters the next top-level grouping.
:meth:`GroupingController.consumeTime` returns every grouping exhausted on
the way, innermost first, so that a caller can close inner annotations
(beats) before outer ones (barlines).

    >>> from scritto.grouping import measuresFromTimesig
    >>> from scritto.duration import Duration
    >>> controller = GroupingController(measuresFromTimesig("2/4"))
    >>> controller.current().left
    Duration(1, 4)
    >>> controller.consumeTime(Duration(1, 2))
    [Grouping(beat, 1/4), Grouping(beat, 1/4), Grouping(measure, 1/2, left=0)]

"""
from __future__ import annotations

import itertools
from collections import deque
from dataclasses import dataclass

from scritto._logutils import LazyFmt, LazyStr
from scritto.common import logger
from scritto.config import config
from scritto.duration import Duration, asDuration
from scritto.errors import EmptyGroupingsError, StackExhaustedError, StructureExhaustedError

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from typing import Iterable, Iterator
    from scritto.common import time_t
    from scritto.grouping import Grouping


__all__ = (
    'ControlledGrouping',
    'GroupingController',
)


@dataclass
class ControlledGrouping:
    """
    A grouping together with the time left to consume from it
    """
    grouping: Grouping
    "The grouping"

    left: Duration = None  # type: ignore
    "Time left. Set to the duration of the grouping when not given"

    def __post_init__(self):
        if self.left is None:
            self.left = self.grouping.duration()

    def isStartOfGrouping(self) -> bool:
        """True if nothing has been consumed from this grouping"""
        return self.left == self.grouping.duration()


class GroupingController:
    """
    Consumes time from a sequence of nested groupings

    Args:
        groupings: the top-level groupings (measures, regions, beats), in
            playback order. It can be any iterable, it is consumed lazily
        descendToLeaf: when entering a grouping, descend through its first
            subdivisions until a leaf is reached. Otherwise only one level
            is entered. If None, use the config ('controller.descendToLeaf')

    Raises:
        EmptyGroupingsError: if no groupings are given
    """

    def __init__(self, groupings: Iterable[Grouping], descendToLeaf: bool | None = None):
        self.stack: list[ControlledGrouping] = []
        """The active groupings, outermost first. The last item is the current grouping"""

        self.descendToLeaf: bool = (descendToLeaf if descendToLeaf is not None
                                    else config['controller.descendToLeaf'])

        self.elapsed: Duration = Duration(0)
        """Total time consumed"""

        self._queue: Iterator[Grouping] = iter(groupings)
        self._lookahead: deque[Grouping] = deque()

        first = self._pullNext()
        if first is None:
            raise EmptyGroupingsError("Passed empty groupings iterator")
        self._enter(first)

    def __repr__(self):
        return f"GroupingController(elapsed={self.elapsed}, stack={self.dump()})"

    def dump(self) -> str:
        """A one-line representation of the stack"""
        if not self.stack:
            return "[]"
        levels = [f"{cg.grouping.kind.value}:{cg.left}/{cg.grouping.duration()}"
                  for cg in self.stack]
        return "[" + ", ".join(levels) + "]"

    def levels(self) -> list[tuple[Grouping, Duration]]:
        """
        The active groupings with the time left in each, outermost first
        """
        return [(cg.grouping, cg.left) for cg in self.stack]

    @property
    def exhausted(self) -> bool:
        """True if all groupings have been consumed"""
        return not self.stack

    def current(self) -> ControlledGrouping:
        """
        The innermost active grouping

        Raises:
            StackExhaustedError: if the stack is empty
        """
        if not self.stack:
            raise StackExhaustedError("No more groupings in the stack")
        return self.stack[-1]

    def available(self) -> Duration:
        """
        Time which can be consumed without pulling new groupings from the queue

        This is the time left in the current top-level grouping plus the
        duration of any grouping already looked ahead
        """
        out = self.stack[0].left if self.stack else Duration(0)
        for grouping in self._lookahead:
            out += grouping.duration()
        return out

    def ensureAvailable(self, time: time_t) -> None:
        """
        Make sure that the structure can supply the given time

        Groupings are pulled from the queue into a look-ahead buffer as needed,
        they are only entered when time is actually consumed.

        Args:
            time: the time to check

        Raises:
            StructureExhaustedError: if the remaining groupings cannot supply
                the given time. The controller is not modified
        """
        time = asDuration(time)
        avail = self.available()
        while avail < time:
            grouping = next(self._queue, None)
            if grouping is None:
                raise StructureExhaustedError(
                    f"Queue is empty: requested {time}, only {avail} left")
            self._lookahead.append(grouping)
            avail += grouping.duration()

    def extend(self, groupings: Iterable[Grouping]) -> None:
        """
        Append top-level groupings to the queue

        If the controller was exhausted, the first of the new
        groupings is entered immediately
        """
        self._queue = itertools.chain(self._queue, groupings)
        if not self.stack:
            grouping = self._pullNext()
            if grouping is not None:
                self._enter(grouping)

    def fragments(self, time: time_t) -> list[Duration]:
        """
        Split the given time at the boundaries of the innermost groupings

        The controller is not modified: the split is computed on a copy of
        the active and looked-ahead groupings

        Args:
            time: the time to split

        Returns:
            the durations which consuming the given time would take from each
            innermost grouping, in order. Their sum equals time

        Raises:
            StructureExhaustedError: if the remaining groupings cannot supply
                the given time
        """
        time = asDuration(time)
        self.ensureAvailable(time)
        shadow = self._shadow()
        out: list[Duration] = []
        while time > 0:
            fragment = min(shadow.current().left, time)
            shadow.consumeTime(fragment)
            out.append(fragment)
            time -= fragment
        return out

    def _shadow(self) -> GroupingController:
        # A detached copy, sharing nothing mutable with this controller
        out = object.__new__(GroupingController)
        out.stack = [ControlledGrouping(cg.grouping.copy(), cg.left) for cg in self.stack]
        out.descendToLeaf = self.descendToLeaf
        out.elapsed = self.elapsed
        out._queue = iter(())
        out._lookahead = deque(grouping.copy() for grouping in self._lookahead)
        return out

    def consumeTime(self, time: time_t) -> list[Grouping]:
        """
        Consume time from the active groupings

        Args:
            time: the amount of time to consume

        Returns:
            the groupings exhausted while consuming the given time, innermost
            first. For example, consuming the last beat of a measure returns
            [beat, measure]

        Raises:
            StructureExhaustedError: if the time requested exceeds the time the
                remaining groupings can supply. In this case the controller is
                left unmodified
        """
        time = asDuration(time)
        self.ensureAvailable(time)
        exhausted: list[Grouping] = []
        while time > 0:
            left = self.current().left
            if left < time:
                # Overflow: consume what is left and move on
                self._deplete(left)
                time -= left
                self._advance(exhausted)
            elif left > time:
                self._deplete(time)
                time = Duration(0)
            else:
                self._deplete(time)
                time = Duration(0)
                self._advance(exhausted)
        return exhausted

    def _pullNext(self) -> Grouping | None:
        if self._lookahead:
            return self._lookahead.popleft()
        return next(self._queue, None)

    def _push(self, grouping: Grouping) -> None:
        self.stack.append(ControlledGrouping(grouping))

    def _enter(self, grouping: Grouping) -> None:
        # Enter a top-level grouping
        assert not self.stack, LazyFmt("Stack should be empty, got %s", self.stack)
        self._push(grouping)
        self._descend()

    def _descend(self) -> None:
        while (sub := self.stack[-1].grouping.nextSubdivision()) is not None:
            self._push(sub)
            if not self.descendToLeaf:
                break
        logger.debug("Entered grouping, stack: %s", LazyStr(self.dump))

    def _deplete(self, time: Duration) -> None:
        # Every active grouping is consumed simultaneously
        for cg in self.stack:
            cg.left -= time
        self.elapsed += time

    def _advance(self, exhausted: list[Grouping]) -> None:
        while True:
            done = self.stack.pop()
            exhausted.append(done.grouping)
            logger.debug("Exhausted %s at %s", done.grouping, self.elapsed)
            if not self.stack:
                grouping = self._pullNext()
                if grouping is not None:
                    self._enter(grouping)
                return
            top = self.stack[-1]
            if top.left == 0 and top.grouping.isEmpty():
                # The parent ends together with its last subdivision
                continue
            self._descend()
            return
