"""LaTeX table export."""

from __future__ import annotations

from tablecraft.config import config
from tablecraft.model import Composite, Image, RenderModel, Text

_SPECIAL = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

_COLUMN_TYPE = {"left": "l", "center": "c", "right": "r"}


def escape_latex(text: str) -> str:
    """Escape characters with special meaning in LaTeX."""
    return "".join(_SPECIAL.get(char, char) for char in text)


def _marks(symbols: tuple[str, ...]) -> str:
    return "".join(rf"\textsuperscript{{{escape_latex(s)}}}" for s in symbols)


def _content(content: Text | Image | Composite) -> str:
    if isinstance(content, Text):
        return escape_latex(content.value)
    if isinstance(content, Image):
        return rf"\includegraphics[height={config.latex_image_height}]{{{content.reference}}}"
    return " ".join(_content(part) for part in content.parts)


def to_latex(model: RenderModel, label: str | None = None) -> str:
    """Render a model as a LaTeX ``table`` with a ``tabular`` body.

    Uses booktabs rules unless disabled in config. Header cells whose
    alignment differs from their column are wrapped in ``\\multicolumn``.

    Args:
        model: Render model
        label: Optional ``\\label`` key (e.g. "tab:results")

    Returns:
        LaTeX source

    """
    if config.latex_booktabs:
        top, mid, bottom = r"\toprule", r"\midrule", r"\bottomrule"
    else:
        top = mid = bottom = r"\hline"

    body_aligns = [
        model.body[0][i].align if model.body else header.align
        for i, header in enumerate(model.headers)
    ]
    column_spec = "".join(_COLUMN_TYPE[align] for align in body_aligns)

    latex_lines = [r"\begin{table}[htbp]", r"\centering"]
    if model.title:
        latex_lines.append(rf"\caption{{{escape_latex(model.title)}}}")
    if label:
        latex_lines.append(rf"\label{{{label}}}")
    if model.subtitle:
        latex_lines.append(rf"{{\small {escape_latex(model.subtitle)}}}\par\medskip")

    latex_lines.extend([rf"\begin{{tabular}}{{{column_spec}}}", top])

    header_cells = []
    for header, body_align in zip(model.headers, body_aligns):
        text = escape_latex(header.label) + _marks(header.footnotes)
        if header.align != body_align:
            text = rf"\multicolumn{{1}}{{{_COLUMN_TYPE[header.align]}}}{{{text}}}"
        header_cells.append(text)
    latex_lines.append(" & ".join(header_cells) + r" \\")
    latex_lines.append(mid)

    for row in model.body:
        cells = [_content(cell.content) + _marks(cell.footnotes) for cell in row]
        latex_lines.append(" & ".join(cells) + r" \\")

    latex_lines.extend([bottom, r"\end{tabular}"])

    for note in model.footnotes:
        latex_lines.append(
            rf"\par{{\footnotesize \textsuperscript{{{escape_latex(note.symbol)}}}"
            rf"~{escape_latex(note.text)}}}"
        )
    for source_note in model.source_notes:
        latex_lines.append(rf"\par{{\footnotesize {escape_latex(source_note)}}}")

    latex_lines.append(r"\end{table}")
    return "\n".join(latex_lines)
