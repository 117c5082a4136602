#!/usr/bin/env python3
"""
bstdemo - An interactive, unbalanced binary search tree.

Insert, remove, find the maximum, draw the tree sideways, and time bulk
insertion, all from a numbered text menu.

Architecture: Functional Core, Imperative Shell
- Data: dataclasses (tree nodes are relinked in place, everything else frozen)
- Computations: functions that return results (no I/O, no printing)
- Renderers: pure functions (data → str)
- Actions: read tokens/write text/time at edges only
"""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Callable, Iterable, Iterator, Sequence, TextIO


EMPTY_MAXIMUM = -1  # Same value a caller could insert; see DESIGN.md
INDENT_STEP = 5
BENCHMARK_COUNTS: tuple[int, ...] = (100, 1_000, 10_000, 100_000)
VALUE_RANGE_FACTOR = 10


# =============================================================================
# DOMAIN TYPES (Data)
# =============================================================================


class StepKind(Enum):
    """One move made while looking for an insertion point."""

    GO_LEFT = auto()
    GO_RIGHT = auto()
    PLACE = auto()


@dataclass
class Node:
    """A tree element, owned by its parent. Children are None when empty."""

    value: int
    left: Node | None = None
    right: Node | None = None


@dataclass(frozen=True)
class TraceStep:
    """A single line of insertion narration (pure data)."""

    kind: StepKind
    value: int  # node passed for GO_*, value placed for PLACE


@dataclass(frozen=True)
class InsertResult:
    root: Node | None
    inserted: bool
    steps: tuple[TraceStep, ...]


@dataclass(frozen=True)
class RemoveResult:
    root: Node | None
    removed: bool


@dataclass(frozen=True)
class StageTiming:
    """Wall-clock time spent inserting one batch."""

    count: int
    elapsed_ms: float


@dataclass(frozen=True)
class BenchmarkReport:
    stages: tuple[StageTiming, ...]

    @property
    def total_count(self) -> int:
        return sum(stage.count for stage in self.stages)

    @property
    def total_ms(self) -> float:
        return sum(stage.elapsed_ms for stage in self.stages)


# =============================================================================
# TREE OPERATIONS (Computations) - No I/O, no printing
# =============================================================================


def _relink(parent: Node | None, kind: StepKind, root: Node | None, child: Node | None) -> Node | None:
    """Hang child where the search left parent; return the (possibly new) root."""
    if parent is None:
        return child
    if kind is StepKind.GO_LEFT:
        parent.left = child
    else:
        parent.right = child
    return root


def insert_value(root: Node | None, value: int, *, trace: bool = False) -> InsertResult:
    """
    Insert value unless it is already present.

    The only node created is the new leaf; it is linked into its parent in
    place, so the root changes only when the tree was empty. With trace=True
    the result carries one step per node passed on the way down, plus a PLACE
    step when a node is created.

    (Node | None, int) -> InsertResult
    """
    steps: list[TraceStep] = []
    parent: Node | None = None
    kind = StepKind.PLACE
    node = root

    while node is not None:
        if value < node.value:
            kind = StepKind.GO_LEFT
        elif value > node.value:
            kind = StepKind.GO_RIGHT
        else:
            return InsertResult(root=root, inserted=False, steps=tuple(steps))
        if trace:
            steps.append(TraceStep(kind, node.value))
        parent = node
        node = node.left if kind is StepKind.GO_LEFT else node.right

    if trace:
        steps.append(TraceStep(StepKind.PLACE, value))

    root = _relink(parent, kind, root, Node(value))
    return InsertResult(root=root, inserted=True, steps=tuple(steps))


def min_node(node: Node) -> Node:
    """Leftmost node of a non-empty subtree."""
    while node.left is not None:
        node = node.left
    return node


def max_node(node: Node) -> Node:
    """Rightmost node of a non-empty subtree."""
    while node.right is not None:
        node = node.right
    return node


def _splice(node: Node) -> Node | None:
    """Return the subtree that takes the place of node once its value is gone."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left

    # Two children: node keeps its place and takes the in-order successor's
    # value; the successor itself is dropped from the right subtree
    successor = min_node(node.right)
    node.value = successor.value
    node.right = remove_value(node.right, successor.value).root
    return node


def remove_value(root: Node | None, value: int) -> RemoveResult:
    """
    Remove value if present, relinking its parent in place.

    A missing value leaves the tree alone. The root changes only when the
    root node itself is spliced out.

    (Node | None, int) -> RemoveResult
    """
    parent: Node | None = None
    kind = StepKind.PLACE
    node = root

    while node is not None and node.value != value:
        kind = StepKind.GO_LEFT if value < node.value else StepKind.GO_RIGHT
        parent = node
        node = node.left if kind is StepKind.GO_LEFT else node.right

    if node is None:
        return RemoveResult(root=root, removed=False)

    replacement = _splice(node)
    if replacement is not node:
        node.left = node.right = None
    return RemoveResult(root=_relink(parent, kind, root, replacement), removed=True)


def find_maximum(root: Node | None) -> int:
    """
    Largest value in the tree, or EMPTY_MAXIMUM for an empty tree.

    Pure: Node | None -> int
    """
    if root is None:
        return EMPTY_MAXIMUM
    return max_node(root).value


def in_order(root: Node | None) -> tuple[int, ...]:
    """Values in ascending order. Pure: Node | None -> tuple[int, ...]"""
    values: list[int] = []
    stack: list[Node] = []
    node = root

    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right

    return tuple(values)


def iter_postorder(root: Node | None) -> Iterator[Node]:
    """Yield every node, children before their parent."""
    if root is None:
        return

    pending = [root]
    visited: list[Node] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)

    # visited is parent-right-left; reversed it is left-right-parent
    yield from reversed(visited)


def count_nodes(root: Node | None) -> int:
    return sum(1 for _ in iter_postorder(root))


def release(root: Node | None) -> int:
    """
    Tear down a tree, children first. Returns the number of nodes released.

    Each node is detached from its children only after they have been
    released, so no link is cut while a walk could still follow it.
    """
    released = 0
    for node in iter_postorder(root):
        node.left = node.right = None
        released += 1
    return released


def layout(root: Node | None) -> tuple[tuple[int, int], ...]:
    """
    (depth, value) rows in reverse in-order: right subtree, node, left subtree.

    Printed top to bottom this is the tree rotated 90° counter-clockwise.

    Pure: Node | None -> tuple[tuple[int, int], ...]
    """
    rows: list[tuple[int, int]] = []
    stack: list[tuple[Node, int]] = []
    node = root
    depth = 0

    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node = node.right
            depth += 1
        node, depth = stack.pop()
        rows.append((depth, node.value))
        node = node.left
        depth += 1

    return tuple(rows)


def run_benchmark(
    root: Node | None,
    counts: Sequence[int] = BENCHMARK_COUNTS,
    *,
    rng: random.Random,
    clock: Callable[[], float] = time.perf_counter,
) -> tuple[Node | None, BenchmarkReport]:
    """
    Insert count random values per stage into the same growing tree.

    Values for a stage are drawn from [0, count * VALUE_RANGE_FACTOR).
    Insertions are never traced. Randomness and time are injected.
    """
    stages: list[StageTiming] = []

    for count in counts:
        upper = count * VALUE_RANGE_FACTOR
        start = clock()
        for _ in range(count):
            root = insert_value(root, rng.randrange(upper)).root
        finish = clock()
        stages.append(StageTiming(count=count, elapsed_ms=(finish - start) * 1000.0))

    return root, BenchmarkReport(stages=tuple(stages))


# =============================================================================
# TREE (State) - the single owner of a root
# =============================================================================


class BinarySearchTree:
    """
    Owns one root and swaps it for whatever the core operations return.

    Tracing is requested per call; the tree itself has no verbose mode.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return count_nodes(self.root)

    def insert(self, value: int, *, trace: bool = False) -> InsertResult:
        result = insert_value(self.root, value, trace=trace)
        self.root = result.root
        return result

    def remove(self, value: int) -> RemoveResult:
        result = remove_value(self.root, value)
        self.root = result.root
        return result

    def find_maximum(self) -> int:
        return find_maximum(self.root)

    def display(self) -> str:
        return render_tree(self.root)

    def test_performance(
        self,
        counts: Sequence[int] = BENCHMARK_COUNTS,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> BenchmarkReport:
        self.root, report = run_benchmark(
            self.root, counts, rng=rng or random.Random(), clock=clock
        )
        return report

    def clear(self) -> int:
        """Release every node and leave the tree empty."""
        released = release(self.root)
        self.root = None
        return released


# =============================================================================
# RENDERERS (Pure: Data -> str)
# =============================================================================


class Choice(IntEnum):
    ADD = 1
    REMOVE = 2
    DISPLAY = 3
    MAXIMUM = 4
    BENCHMARK = 5
    EXIT = 6


MENU_LABELS = {
    Choice.ADD: "Add Node",
    Choice.REMOVE: "Remove Node",
    Choice.DISPLAY: "Display Tree",
    Choice.MAXIMUM: "Find Maximum",
    Choice.BENCHMARK: "Run Performance Test",
    Choice.EXIT: "Exit",
}


def render_menu() -> str:
    """Render the menu and choice prompt (no trailing newline)."""
    lines = [""] + [f"{choice.value}. {label}" for choice, label in MENU_LABELS.items()]
    lines.append("Enter your choice: ")
    return "\n".join(lines)


def render_value_prompt(choice: Choice) -> str:
    verb = "add" if choice is Choice.ADD else "remove"
    return f"Enter value to {verb}: "


def render_step(step: TraceStep) -> str:
    match step.kind:
        case StepKind.GO_LEFT:
            return f"Go left from {step.value}"
        case StepKind.GO_RIGHT:
            return f"Go right from {step.value}"
        case StepKind.PLACE:
            return f"Insert {step.value} here."


def render_steps(steps: Sequence[TraceStep]) -> str:
    return "\n".join(render_step(step) for step in steps)


def render_tree(root: Node | None) -> str:
    """Render the sideways tree, larger values on top. Pure: Node | None -> str."""
    lines = ["BST Structure:"]
    for depth, value in layout(root):
        width = INDENT_STEP * (depth + 1)
        lines.append(f"{value:>{width}}")
    return "\n".join(lines)


def render_maximum(value: int) -> str:
    return f"Maximum value in BST: {value}"


def render_benchmark(report: BenchmarkReport) -> str:
    """Render one line per stage. Pure: BenchmarkReport -> str."""
    return "\n".join(
        f"Added {stage.count} elements in {stage.elapsed_ms:g} ms" for stage in report.stages
    )


def render_invalid_choice() -> str:
    return "Invalid choice. Please try again."


def render_exit() -> str:
    return "Exiting program."


def render_error(message: str) -> str:
    """Render an error message. Pure: str -> str."""
    return f"Error: {message}"


# =============================================================================
# ACTIONS (Effects) - I/O happens here only
# =============================================================================


def read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated tokens, one line at a time. Action."""
    for line in stream:
        yield from line.split()


def parse_int(token: str) -> int | None:
    """Accept an optional sign and ASCII digits only, as a C++ stream would."""
    digits = token[1:] if token[:1] in ("+", "-") else token
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(token)


def parse_choice(token: str) -> Choice | None:
    number = parse_int(token)
    if number is None:
        return None
    try:
        return Choice(number)
    except ValueError:
        return None


def emit(out: TextIO, text: str) -> None:
    """Write text as whole lines; empty text writes nothing. Action."""
    if text:
        out.write(text + "\n")


def prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def run_session(
    tree: BinarySearchTree,
    tokens: Iterator[str],
    out: TextIO,
    *,
    verbose: bool = True,
    rng: random.Random | None = None,
    clock: Callable[[], float] = time.perf_counter,
    counts: Sequence[int] = BENCHMARK_COUNTS,
) -> int:
    """
    Drive the numbered menu until Exit or end of input. Returns exit code.

    Bad input is reported and the menu is shown again; nothing here raises.
    """
    rng = rng or random.Random()

    while True:
        prompt(out, render_menu())
        token = next(tokens, None)
        if token is None:
            out.write("\n")
            return 0

        choice = parse_choice(token)

        match choice:
            case Choice.ADD | Choice.REMOVE:
                prompt(out, render_value_prompt(choice))
                raw = next(tokens, None)
                if raw is None:
                    out.write("\n")
                    return 0
                value = parse_int(raw)
                if value is None:
                    emit(out, render_error(f"{raw!r} is not an integer."))
                elif choice is Choice.ADD:
                    emit(out, render_steps(tree.insert(value, trace=verbose).steps))
                else:
                    tree.remove(value)

            case Choice.DISPLAY:
                emit(out, tree.display())

            case Choice.MAXIMUM:
                emit(out, render_maximum(tree.find_maximum()))

            case Choice.BENCHMARK:
                report = tree.test_performance(counts, rng=rng, clock=clock)
                emit(out, render_benchmark(report))

            case Choice.EXIT:
                emit(out, render_exit())
                return 0

            case _:
                emit(out, render_invalid_choice())


# =============================================================================
# MAIN (Orchestration) - Wiring only
# =============================================================================


def parse_counts(text: str) -> tuple[int, ...]:
    """Parse "100,1000" into stage counts (argparse type)."""
    import argparse

    try:
        counts = tuple(int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count list: {text!r}") from None
    if not counts or any(count <= 0 for count in counts):
        raise argparse.ArgumentTypeError(f"counts must be positive: {text!r}")
    return counts


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point. Parses args, preloads the tree, runs the menu."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Interactive unbalanced binary search tree."
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=int,
        help="Values to insert before the menu starts",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not narrate the path taken by each insertion",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the performance test's random values",
    )
    parser.add_argument(
        "--counts",
        type=parse_counts,
        default=BENCHMARK_COUNTS,
        help="Comma-separated performance test stages (default: 100,1000,10000,100000)",
    )

    args = parser.parse_args(argv)

    tree = BinarySearchTree(args.values)

    return run_session(
        tree,
        read_tokens(sys.stdin),
        sys.stdout,
        verbose=not args.quiet,
        rng=random.Random(args.seed),
        counts=args.counts,
    )


if __name__ == "__main__":
    sys.exit(main())
