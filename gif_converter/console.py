"""Coloured console output for batch progress."""

from colorama import Fore, Style, just_fix_windows_console


class ConsoleReporter:
    """Prints per-file results and batch notices to the terminal."""

    def __init__(self, use_color: bool = True):
        """
        Initialize ConsoleReporter.

        Args:
            use_color: Emit ANSI colours (translated on Windows by colorama)
        """
        self.use_color = use_color
        if use_color:
            just_fix_windows_console()

    def _paint(self, color: str, text: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def file_started(self, name: str, current: int, total: int) -> None:
        print(f"\n{'=' * 60}")
        print(f"File {current}/{total}: {name}")
        print(f"{'=' * 60}")

    def success(self, source_name: str, output_name: str, padded: bool) -> None:
        note = " (padded)" if padded else ""
        print(self._paint(Fore.GREEN, f"[OK] Converted: {source_name} -> {output_name}{note}"))

    def failure(self, source_name: str, reason: str) -> None:
        print(self._paint(Fore.RED, f"[FAILED] {source_name}"))
        print(self._paint(Fore.RED, f"   Reason: {reason}"))

    def skipped(self, source_name: str) -> None:
        print(self._paint(Fore.YELLOW, f"[SKIPPED] No video stream found in {source_name}"))

    def no_files(self, directory) -> None:
        print(self._paint(Fore.YELLOW, f"No GIF files found in {directory}"))

    def completed(self) -> None:
        print("\nAll conversions completed.")

    def fatal(self, error: BaseException) -> None:
        """Report an error that aborts the batch before any conversion."""
        print(self._paint(Fore.RED + Style.DIM, "Fatal setup error:"))
        print(self._paint(Fore.RED + Style.DIM, f"   {type(error).__name__}: {error}"))
