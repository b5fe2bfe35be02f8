# bilingual_lens/interface/cli.py

from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from bilingual_lens.application.highlighter import compute_spans, segment_text
from bilingual_lens.application.viewer import DocumentView
from bilingual_lens.domain.interfaces import ScrollPanePort
from bilingual_lens.domain.languages import language_name, native_name
from bilingual_lens.domain.models import (
    DocumentPair,
    MatchCandidate,
    Pane,
    SearchResult,
    SearchResultSet,
    SearchScope,
    TextSegment,
)


console = Console()

LIVE_STYLE = "bold black on yellow"
PINNED_STYLE = "black on bright_cyan"

SCOPE_CHOICES = {
    "all": SearchScope.BOTH,
    "original": SearchScope.ORIGINAL_ONLY,
    "english": SearchScope.TRANSLATED_ONLY,
}


class ConsolePane(ScrollPanePort):
    """
    Line-based scroll pane for the terminal split view.
    Heights and offsets are measured in text lines.
    """

    def __init__(self, text: Text, viewport_lines: int):
        if viewport_lines <= 0:
            raise ValueError("viewport_lines must be positive.")
        self._lines = text.split("\n", allow_blank=True)
        self._viewport_lines = viewport_lines
        self._offset = 0

    @property
    def content_height(self) -> float:
        return len(self._lines)

    @property
    def viewport_height(self) -> float:
        return self._viewport_lines

    @property
    def max_offset(self) -> int:
        return max(0, len(self._lines) - self._viewport_lines)

    def get_offset(self) -> float:
        return self._offset

    def set_offset(self, value: float) -> None:
        self._offset = min(self.max_offset, max(0, int(round(value))))

    def visible(self) -> Text:
        window = self._lines[self._offset:self._offset + self._viewport_lines]
        return Text("\n").join(window)


def display_welcome_banner() -> None:
    console.print(Panel.fit(
        "[bold cyan]🌐 Bilingual Document Search[/bold cyan]\n"
        "[dim]Search originals and English translations side by side[/dim]",
        box=box.DOUBLE,
        border_style="cyan",
    ))


def display_corpus_status(documents: List[DocumentPair]) -> None:
    table = Table(title="Loaded documents", box=box.SIMPLE_HEAD)
    table.add_column("ID", style="dim")
    table.add_column("File", style="bold white")
    table.add_column("Language")
    table.add_column("Lines", justify="right")

    for document in documents:
        table.add_row(
            document.id,
            document.filename,
            f"{language_name(document.original_language)} ({native_name(document.original_language)})",
            f"{document.line_count(Pane.ORIGINAL)} / {document.line_count(Pane.TRANSLATED)}",
        )

    console.print(table)
    console.print(f"[green]✓[/green] [bold]{len(documents)}[/bold] documents ready for search.\n")


def prompt_for_query() -> str:
    return Prompt.ask("\n[bold yellow]🔍 Search in any language[/bold yellow]")


def prompt_for_scope() -> SearchScope:
    answer = Prompt.ask(
        "[dim]Search in[/dim]",
        choices=list(SCOPE_CHOICES),
        default="all",
    )
    return SCOPE_CHOICES[answer]


def highlight(segments: Iterable[TextSegment]) -> Text:
    """Render segments as rich Text, styling live and pinned marks differently."""
    rendered = Text()
    for segment in segments:
        if segment.span is None:
            rendered.append(segment.text)
        else:
            rendered.append(segment.text, style=PINNED_STYLE if segment.span.pinned else LIVE_STYLE)
    return rendered


def _match_preview(match: MatchCandidate, query: str) -> Text:
    return highlight(segment_text(match.text, compute_spans(match.text, query)))


def display_results(result_set: SearchResultSet, preview_limit: int = 3) -> None:
    if not result_set.results:
        display_no_results(result_set.query)
        return

    plural = "s" if result_set.document_count != 1 else ""
    console.print(
        f"\n[bold]Found {result_set.total_matches} matches in "
        f"{result_set.document_count} document{plural} for:[/bold] "
        f"[italic]\"{escape(result_set.query)}\"[/italic]\n"
    )

    for rank, result in enumerate(result_set.results, start=1):
        console.print(Panel(
            _result_body(result, result_set.query, preview_limit),
            title=f"[bold]#{rank}[/bold] {escape(result.filename)}",
            subtitle=f"id: {escape(result.document_id)}",
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2),
        ))


def _result_body(result: SearchResult, query: str, preview_limit: int) -> Text:
    body = Text()
    body.append("🌐 Language: ", style="dim")
    body.append(language_name(result.original_language), style="bold white")
    body.append(f"\n🎯 {result.total_matches} match{'es' if result.total_matches != 1 else ''}")

    sides = (
        (f"Original ({native_name(result.original_language)})", result.original_matches),
        ("English translation", result.translated_matches),
    )
    for label, matches in sides:
        if not matches:
            continue
        body.append(f"\n\n{label}: {len(matches)} match{'es' if len(matches) != 1 else ''}\n", style="bold")
        for match in matches[:preview_limit]:
            body.append("\n")
            body.append_text(_match_preview(match, query))
            body.append(f"\n[score {match.score:.4f}]\n", style="dim")
        if len(matches) > preview_limit:
            body.append(f"\n+{len(matches) - preview_limit} more matches", style="italic dim")

    return body


def display_no_results(query: str) -> None:
    console.print(
        f"\n[yellow]No matches for[/yellow] [italic]\"{escape(query)}\"[/italic]. "
        "[dim]Try different keywords or search in a different language.[/dim]\n"
    )


def prompt_for_document(result_set: SearchResultSet) -> Optional[str]:
    """Ask which result to open; returns its document id, or None to skip."""
    choices = [str(i) for i in range(1, result_set.document_count + 1)]
    answer = Prompt.ask(
        "\n[dim]Open result # (enter to skip)[/dim]",
        choices=choices + [""],
        default="",
        show_choices=False,
    )
    if not answer:
        return None
    return result_set.results[int(answer) - 1].document_id


def build_panes(view: DocumentView, viewport_lines: int) -> dict[Pane, ConsolePane]:
    panes = {}
    for pane in Pane:
        panes[pane] = ConsolePane(highlight(view.segments(pane)), viewport_lines)
        view.attach(pane, panes[pane])
    return panes


def display_split_view(view: DocumentView, panes: dict[Pane, ConsolePane], focus: Pane) -> None:
    document = view.document
    table = Table(box=box.ROUNDED, expand=True, show_lines=False)

    for pane in Pane:
        label = (
            f"{native_name(document.original_language)} original"
            if pane is Pane.ORIGINAL else "English translation"
        )
        state = view.controller.state(pane)
        marker = "▶ " if pane is focus else ""
        table.add_column(
            f"{marker}{label}  [dim]{int(state.offset)}/{int(state.max_offset)}[/dim]",
            ratio=1,
        )

    table.add_row(panes[Pane.ORIGINAL].visible(), panes[Pane.TRANSLATED].visible())

    sync = "[green]on[/green]" if view.controller.sync_enabled else "[red]off[/red]"
    console.print(table)
    console.print(
        f"[dim]{document.filename} · sync scroll: [/dim]{sync}"
        f"[dim] · query: [/dim][{LIVE_STYLE}] {escape(view.live_query) or '-'} [/]"
        f"[dim] · [/dim][{PINNED_STYLE}] pinned matches [/]"
    )


def prompt_view_action() -> str:
    return Prompt.ask(
        "[dim]down / up / switch pane / toggle sync / close[/dim]",
        choices=["d", "u", "s", "t", "c"],
        default="d",
    )


def display_error(message: str) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}\n")


def ask_continue() -> bool:
    answer = Prompt.ask(
        "\n[dim]Search again?[/dim]",
        choices=["y", "n"],
        default="y",
    )
    return answer.lower() == "y"
