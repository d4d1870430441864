import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from cleanup_html.sanitize import clean_html

log = logging.getLogger(__name__)

HTML_SUFFIX = ".html"
OUTPUT_SUFFIX = os.environ.get("CLEANUP_HTML_SUFFIX", "_processed.html")
DEFAULT_THREADS = int(os.environ.get("CLEANUP_HTML_THREADS", "1"))


@dataclass
class BatchResult:
    processed: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def output_path_for(input_path: Path) -> Path:
    """
    :param input_path: Source HTML file
    :return: Sibling path with ``.html`` replaced by the output suffix
    """
    name = input_path.name
    if name.endswith(HTML_SUFFIX):
        name = name[: -len(HTML_SUFFIX)]
    return input_path.with_name(name + OUTPUT_SUFFIX)


def process_file(input_path: Path, output_path: Path | None = None) -> bool:
    """
    Read one HTML file, clean it and write the result.

    :param input_path: File to read.
    :param output_path: Destination; defaults to ``output_path_for(input_path)``.
    :returns: True when the output was written. Read and write errors are
              logged, never raised.
    """
    output_path = output_path or output_path_for(input_path)
    log.info("[worker.process_file] enter input=%s", input_path)
    try:
        text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as e:
        log.error("[worker.process_file] read_error input=%s: %s", input_path, e)
        return False

    cleaned = clean_html(text)

    try:
        output_path.write_text(cleaned, encoding="utf-8")
    except OSError as e:
        log.error("[worker.process_file] write_error output=%s: %s", output_path, e)
        return False
    log.info("[worker.process_file] exit input=%s output=%s len=%d", input_path, output_path, len(cleaned))
    return True


def list_html_files(directory: Path) -> list[Path]:
    files = [p for p in directory.iterdir() if p.is_file() and p.name.endswith(HTML_SUFFIX)]
    log.debug("[worker.list_html_files] dir=%s found=%d", directory, len(files))
    return sorted(files)


def _run(path: Path) -> bool:
    try:
        return process_file(path)
    except Exception as e:
        log.exception("[worker.process_directory] file_error input=%s: %s", path, e)
        return False


def _record(result: BatchResult, path: Path, ok: bool) -> None:
    (result.processed if ok else result.failed).append(path)


def process_directory(directory: Path, threads: int = DEFAULT_THREADS) -> BatchResult:
    """
    Clean every ``.html`` file directly inside ``directory``.

    :param directory: Directory to scan (not recursive).
    :param threads: Worker threads; 1 processes the files in order.
    :returns: Paths that were processed and paths that failed.
    """
    result = BatchResult()
    files = list_html_files(directory)
    log.info("[worker.process_directory] dir=%s files=%d threads=%d", directory, len(files), threads)

    if threads <= 1:
        for path in files:
            _record(result, path, _run(path))
    else:
        with ThreadPoolExecutor(max_workers=threads) as executor:
            futures = {executor.submit(_run, path): path for path in files}
            for future in as_completed(futures):
                _record(result, futures[future], future.result())

    log.info(
        "[worker.process_directory] exit processed=%d failed=%d",
        len(result.processed),
        len(result.failed),
    )
    return result
