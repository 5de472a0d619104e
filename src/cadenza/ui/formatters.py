"""
Display Formatters Module
Handles formatting and displaying of songs, albums, playlists and menus.
"""

from typing import Iterable, List, Mapping, Optional, Sequence, Tuple
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.align import Align
from rich import box
from rich.markup import escape

from ..core.config import LIBRARY_CONFIG
from ..models.playlist import Playlist
from ..models.song import Album, Song
from .styling import Styling


class DisplayFormatters:
    """Formatters for displaying library contents and UI elements."""

    def __init__(self, console: Console):
        self.console = console
        self.styling = Styling(console)

    def create_header_panel(self, title: str, subtitle: Optional[str] = None) -> Panel:
        """Create a styled header panel."""
        header_text = Text(title, style="bold cyan")
        if subtitle:
            header_text.append(f"\n{subtitle}", style="dim")
        return Panel(
            Align.center(header_text),
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        )

    def format_rating(self, rating: Optional[int]) -> Text:
        """Format a rating as stars, colored by value."""
        if rating is None:
            return Text("—", style="dim")
        stars = "★" * rating + "☆" * (LIBRARY_CONFIG["MAX_RATING"] - rating)
        if rating >= LIBRARY_CONFIG["TOP_RATED_THRESHOLD"]:
            return Text(stars, style="bold green")
        elif rating >= LIBRARY_CONFIG["DEFAULT_RATING"]:
            return Text(stars, style="bold yellow")
        else:
            return Text(stars, style="bold red")

    def display_menu(self, title: str, options: Sequence[Tuple[str, str]]):
        """Display a numbered menu."""
        self.console.print()
        self.console.print(f"[bold]{escape(title)}[/bold]")
        options_table = Table(show_header=False, box=box.SIMPLE, padding=(0, 2))
        options_table.add_column("Option", style="bold white", width=4, justify="right")
        options_table.add_column("Description", style="cyan")
        for key, description in options:
            options_table.add_row(key, description)
        self.console.print(options_table)

    def display_songs(
        self,
        songs: List[Song],
        title: str,
        ratings: Optional[Mapping[str, int]] = None,
        play_counts: Optional[Mapping[str, int]] = None
    ):
        """Display songs in a table, with the user's ratings and plays when given."""
        if not songs:
            self.styling.warning(f"No songs to show for {escape(title)}.")
            return

        self.console.print()
        self.console.print(self.create_header_panel(
            f"🎵 {title.upper()}",
            f"{len(songs)} song{'s' if len(songs) != 1 else ''}"
        ))

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="blue"
        )
        table.add_column("#", style="bold white", width=4, justify="right")
        table.add_column("Title", style="white")
        table.add_column("Artist", style="green")
        table.add_column("Album", style="yellow")
        table.add_column("Genre", style="magenta")
        table.add_column("Rating", justify="center")
        if play_counts is not None:
            table.add_column("Plays", style="cyan", justify="right")

        for i, song in enumerate(songs, 1):
            rating = song.rating
            if ratings is not None and song.title in ratings:
                rating = ratings[song.title]
            row = [
                str(i),
                Text(song.title),
                Text(song.artist),
                Text(song.album),
                Text(song.genre),
                self.format_rating(rating)
            ]
            if play_counts is not None:
                row.append(str(play_counts.get(song.title, 0)))
            table.add_row(*row)

        self.console.print(table)
        self.console.print()

    def display_albums(self, albums: List[Album], title: str = "Albums"):
        """Display albums in a table."""
        if not albums:
            self.styling.warning(f"No albums to show for {escape(title)}.")
            return

        self.console.print()
        self.console.print(self.create_header_panel(
            f"📀 {title.upper()}",
            f"{len(albums)} album{'s' if len(albums) != 1 else ''}"
        ))

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="cyan"
        )
        table.add_column("#", style="bold white", width=4, justify="right")
        table.add_column("Album", style="yellow")
        table.add_column("Artist", style="green")
        table.add_column("Genre", style="magenta")
        table.add_column("Year", style="cyan", justify="center")
        table.add_column("Tracks", style="white", justify="right")

        for i, album in enumerate(albums, 1):
            year = str(album.year) if album.year else "—"
            table.add_row(
                str(i), Text(album.title), Text(album.artist), Text(album.genre or "—"), year, str(len(album))
            )

        self.console.print(table)
        self.console.print()

    def display_album_details(self, album: Album):
        """Display an album's metadata and track listing."""
        header_content = f"[bold yellow]{escape(album.title)}[/bold yellow]"
        header_content += f"\n[green]by {escape(album.artist)}[/green]"
        if album.genre:
            header_content += f"\n[magenta]Genre: {escape(album.genre)}[/magenta]"
        if album.year:
            header_content += f"\n[cyan]Released: {album.year}[/cyan]"

        self.console.print()
        self.console.print(Panel(
            header_content,
            title="[bold cyan]🎼 TRACK LISTING[/bold cyan]",
            border_style="cyan",
            box=box.ROUNDED,
            padding=(1, 2)
        ))

        for position, song in enumerate(album.songs, 1):
            self.console.print(f"  [bold white]{position:2d}.[/bold white] [white]{escape(song.title)}[/white]")
        self.console.print()

    def display_titles(self, titles: Iterable[str], title: str, counts: Optional[Mapping[str, int]] = None):
        """Display a numbered list of song titles, optionally with counts."""
        titles = list(titles)
        if not titles:
            self.styling.warning(f"Nothing to show for {escape(title)}.")
            return

        self.console.print()
        self.console.print(f"[bold cyan]{title}[/bold cyan]")
        for position, song_title in enumerate(titles, 1):
            line = f"  [bold white]{position:2d}.[/bold white] [white]{escape(song_title)}[/white]"
            if counts is not None:
                plays = counts.get(song_title, 0)
                line += f" [dim]({plays} play{'s' if plays != 1 else ''})[/dim]"
            self.console.print(line)
        self.console.print()

    def display_playlists(self, playlists: Iterable[Playlist]):
        """Display every playlist with its songs."""
        playlists = list(playlists)
        if not playlists:
            self.styling.warning("You have no playlists yet.")
            return

        for playlist in playlists:
            self.console.print()
            self.console.print(Panel(
                "\n".join(f"[white]{escape(song.title)}[/white] [dim]- {escape(song.artist)}[/dim]" for song in playlist)
                or "[dim]empty[/dim]",
                title=f"[bold cyan]🎧 {escape(playlist.name)}[/bold cyan]",
                subtitle=f"{len(playlist)} song{'s' if len(playlist) != 1 else ''}",
                border_style="cyan",
                box=box.ROUNDED,
                padding=(0, 2)
            ))
        self.console.print()
