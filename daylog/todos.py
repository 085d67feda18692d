"""Todo checklist parsing and weighted completion for DayLog.

A day's todo list is one markdown blob:

    - [x] Write report #q1
    	- [ ] ==Send draft==
    	- [x] Collect numbers
    - [ ] Groceries

Indentation (tabs, or two spaces per level) nests items. Completion is
weighted by the tree: each parent's weight is split evenly between its
children, so a root with ten subtasks counts the same as a root with none.
"""

from __future__ import annotations

import logging
import re

from daylog.dayclock import round_half_up
from daylog.models import QUADRANTS, TodoItem, TodoNode

logger = logging.getLogger(__name__)

CHECKBOX_RE = re.compile(r"^[\t ]*- \[( |x)\] (.+)$")
LEADING_WS_RE = re.compile(r"^[\t ]*")
QUADRANT_RE = re.compile(r"#(q[1-4])\b", re.ASCII)
HIGHLIGHT_RE = re.compile(r"==.*==")


# ── Parsing ───────────────────────────────────────────────────


def is_highlighted(text: str) -> bool:
    return bool(HIGHLIGHT_RE.search(text))


def parse_indent(line: str) -> int:
    """Tabs count one level each, spaces two per level."""
    lead = LEADING_WS_RE.match(line).group(0)
    return lead.count("\t") + lead.count(" ") // 2


def parse_todos(content: str) -> list[TodoItem]:
    """Extract checklist items from a todo blob.

    Recognizes:
        - [ ] Task
        - [x] Task #q2
    Other lines are skipped. line_index is the zero-based line number.
    """
    items = []
    for i, line in enumerate((content or "").split("\n")):
        m = CHECKBOX_RE.match(line)
        if not m:
            continue
        raw = m.group(2)
        quadrant = "inbox"
        text = raw
        q = QUADRANT_RE.search(raw)
        if q:
            quadrant = q.group(1)
            text = raw.replace(q.group(0), "", 1).strip()
        items.append(TodoItem(
            checked=m.group(1) == "x",
            text=text,
            indent=parse_indent(line),
            line_index=i,
            quadrant=quadrant,
            weight=2 if is_highlighted(raw) else 1,
        ))
    return items


# ── Tree & weighted rate ──────────────────────────────────────


def build_task_tree(items: list[TodoItem]) -> list[TodoNode]:
    """Rebuild the parent/child forest from flat indentation."""
    roots: list[TodoNode] = []
    stack: list[tuple[TodoNode, int]] = []
    for item in items:
        node = TodoNode(item=item, weight=item.weight)
        while stack and stack[-1][1] >= item.indent:
            stack.pop()
        if stack:
            stack[-1][0].children.append(node)
        else:
            roots.append(node)
        stack.append((node, item.indent))
    return roots


def calculate_weighted_completion(node: TodoNode, parent_weight: float) -> tuple[float, float]:
    """Return (weight, completed_weight) for the subtree under *node*.

    Leaves are all-or-nothing; a parent's own checkbox is ignored once it
    has children. Walks an explicit stack so deep nesting is safe.
    """
    completed = 0.0
    pending = [(node, parent_weight)]
    while pending:
        current, weight = pending.pop()
        if not current.children:
            if current.item.checked:
                completed += weight
            continue
        share = weight / len(current.children)
        pending.extend((child, share) for child in current.children)
    return parent_weight, completed


def calculate_total_weighted_rate(items: list[TodoItem]) -> int:
    """Weighted completion percentage, 0-100."""
    if not items:
        return 0
    total_weight = 0.0
    total_completed = 0.0
    for root in build_task_tree(items):
        weight, completed = calculate_weighted_completion(root, root.weight)
        total_weight += weight
        total_completed += completed
    if total_weight <= 0:
        return 0
    return int(round_half_up(total_completed / total_weight * 100))


# ── Editing helpers ───────────────────────────────────────────


def toggle_todo_line(content: str, line_index: int) -> str:
    """Flip the checkbox on one line, leaving every other byte untouched."""
    lines = content.split("\n")
    if not 0 <= line_index < len(lines):
        return content
    line = lines[line_index]
    m = CHECKBOX_RE.match(line)
    if not m:
        return content
    mark = "x" if m.group(1) == " " else " "
    pos = m.start(1)
    lines[line_index] = line[:pos] + mark + line[pos + 1:]
    return "\n".join(lines)


def continue_checklist_prefix(line: str) -> str:
    """Prefix for the line inserted after *line* when the user hits Enter."""
    lead = LEADING_WS_RE.match(line).group(0)
    body = line.strip()
    # checked lines continue unchecked
    if body.startswith("- [ ] ") or body.startswith("- [x] "):
        return lead + "- [ ] "
    if body.startswith("- "):
        return lead + "- "
    return lead


def indent_todo_line(content: str, line_index: int) -> str:
    """Nest one line a level deeper by prefixing a tab."""
    lines = content.split("\n")
    if not 0 <= line_index < len(lines):
        return content
    lines[line_index] = "\t" + lines[line_index]
    return "\n".join(lines)


def outdent_todo_line(content: str, line_index: int) -> str:
    """Remove one leading tab; lines without one are left alone."""
    lines = content.split("\n")
    if not 0 <= line_index < len(lines) or not lines[line_index].startswith("\t"):
        return content
    lines[line_index] = lines[line_index][1:]
    return "\n".join(lines)


# ── Views ─────────────────────────────────────────────────────


def search_todos(content: str, query: str, limit: int = 5) -> list[TodoItem]:
    """Items whose text contains *query*; the first *limit* items if blank."""
    items = parse_todos(content)
    q = (query or "").strip().lower()
    if not q:
        return items[:limit]
    return [i for i in items if q in i.text.lower()]


def group_by_quadrant(items: list[TodoItem]) -> dict[str, list[TodoItem]]:
    groups: dict[str, list[TodoItem]] = {q: [] for q in QUADRANTS}
    for item in items:
        groups[item.quadrant].append(item)
    return groups


def count_completed(contents: list[str]) -> int:
    """Checked items across many days' todo blobs."""
    total = sum(sum(1 for i in parse_todos(c) if i.checked) for c in contents)
    logger.debug(f"Counted {total} completed todos across {len(contents)} days")
    return total
