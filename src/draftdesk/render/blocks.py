"""Content rendering and active-section tracking.

Body text is shown verbatim: each line is a heading, a line break or a paragraph. No inline
markdown (bold, italics, links) is interpreted.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field

from draftdesk.models import (
    Block,
    DocumentOutput,
    HeadingBlock,
    LineBreakBlock,
    OutlineEntry,
    ParagraphBlock,
)
from draftdesk.render.outline import HEADING_RE, derive_outline, find_entry, section_id, split_lines


def render_blocks(content: str, active_section_id: str | None = None) -> list[Block]:
    """Classify each content line into a display block."""

    blocks: list[Block] = []
    if not content:
        return blocks
    for index, line in enumerate(split_lines(content)):
        m = HEADING_RE.match(line)
        if m:
            level = len(m.group("hashes"))
            anchor = section_id(index)
            blocks.append(
                HeadingBlock(
                    line_index=index,
                    id=anchor,
                    level=level,
                    text=m.group("text"),
                    style="heading-primary" if level == 1 else "heading-secondary",
                    active=anchor == active_section_id,
                )
            )
        elif line.strip() == "":
            blocks.append(LineBreakBlock(line_index=index))
        else:
            blocks.append(ParagraphBlock(line_index=index, text=line))
    return blocks


@dataclass
class DocumentView:
    """A document together with its outline and the currently selected section."""

    output: DocumentOutput
    outline: list[OutlineEntry] = field(init=False)
    active_section_id: str | None = None

    def __post_init__(self) -> None:
        self.outline = derive_outline(self.output.content)
        if self.active_section_id is not None and find_entry(self.outline, self.active_section_id) is None:
            self.active_section_id = None

    @property
    def blocks(self) -> list[Block]:
        return render_blocks(self.output.content, self.active_section_id)

    def select(self, entry_id: str) -> str:
        """Mark an outline entry active and return the anchor to scroll to.

        Raises:
            KeyError: The id is not in the outline.
        """

        if find_entry(self.outline, entry_id) is None:
            raise KeyError(entry_id)
        self.active_section_id = entry_id
        return entry_id


def render_html(view: DocumentView) -> str:
    """Render a view as an HTML fragment: outline navigation followed by the article."""

    esc = html.escape
    out: list[str] = ['<nav class="outline">']
    for entry in view.outline:
        classes = ["outline-entry", f"level-{entry.level}"]
        if entry.id == view.active_section_id:
            classes.append("active")
        out.append(
            f'<a class="{" ".join(classes)}" href="#{entry.id}" '
            f'data-section="{entry.id}">{esc(entry.text)}</a>'
        )
    out.append("</nav>")

    out.append('<article class="document">')
    out.append(f'<span class="badge">{esc(view.output.label)}</span>')
    out.append(f'<h1 class="document-title">{esc(view.output.display_title)}</h1>')
    for block in view.blocks:
        if isinstance(block, HeadingBlock):
            classes = block.style + (" active" if block.active else "")
            out.append(f'<div id="{block.id}" class="{classes}">{esc(block.text)}</div>')
        elif isinstance(block, LineBreakBlock):
            out.append("<br>")
        else:
            out.append(f"<p>{esc(block.text)}</p>")
    out.append("</article>")
    return "\n".join(out)
