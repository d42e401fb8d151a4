import codecs
import html
import os
import shutil
from typing import Callable, Generator, Iterable, NamedTuple, Optional

from chunk_template import render_chunk, template_overhead

TARGET_HTML_SIZE = 1024 * 1024
MIN_CHUNK_BUDGET = 1024
LINES_PER_CHUNK_ESTIMATE = 300
DEFAULT_ENCODING = 'utf-8'
DECODE_ERRORS = 'replace'
OUTPUT_DIR_SUFFIX = '_html_chunks'

ENCODINGS = {
    'utf-8': 'utf-8',
    'utf8': 'utf-8',
    'utf-16': 'utf-16',
    'utf16': 'utf-16',
    'utf-16be': 'utf-16-be',
    'utf-16le': 'utf-16-le',
    'gbk': 'gbk',
    'ansi': 'gbk',
}
SUPPORTED_ENCODINGS = tuple(ENCODINGS)

OverheadFunc = Callable[[str, int, int], int]


class UnsupportedEncodingError(ValueError):
    pass


class ChunkFile(NamedTuple):
    index: int
    path: str
    size: int


def resolve_encoding(name: str) -> Optional[codecs.CodecInfo]:
    codec = ENCODINGS.get(name.strip().lower())
    if codec is None:
        return None
    return codecs.lookup(codec)


def escape_line(line: str) -> str:
    return html.escape(line + "\n")


def read_lines(stream) -> Generator[str, None, None]:
    """Yield lines without their terminator; CRLF endings lose the CR too."""
    for raw in stream:
        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        yield raw


def count_lines(stream) -> int:
    return sum(1 for _ in stream)


def estimate_total_chunks(total_lines: int) -> int:
    return max(1, total_lines // LINES_PER_CHUNK_ESTIMATE)


def chunk_budget(overhead: OverheadFunc, file_name: str, estimated_total: int, chunk_index: int,
                 target_size=TARGET_HTML_SIZE, min_budget=MIN_CHUNK_BUDGET) -> int:
    budget = target_size - overhead(file_name, estimated_total, chunk_index)
    if budget < 0:
        return min_budget
    return budget


def split_text(lines: Iterable[str], file_name: str, estimated_total: int,
               overhead: OverheadFunc = template_overhead,
               target_size=TARGET_HTML_SIZE, min_budget=MIN_CHUNK_BUDGET) -> Generator[str, None, None]:
    chunk_index = 1
    budget = chunk_budget(overhead, file_name, estimated_total, chunk_index, target_size, min_budget)
    current = []
    current_size = 0

    for line in lines:
        escaped = escape_line(line)
        line_size = len(escaped.encode('utf-8'))

        if current and current_size + line_size > budget:
            yield "".join(current)
            current = []
            current_size = 0
            chunk_index += 1
            # digit widths of the metadata change the overhead, so it is per chunk
            budget = chunk_budget(overhead, file_name, estimated_total, chunk_index, target_size, min_budget)

        # a line larger than the whole budget still goes in whole
        current.append(escaped)
        current_size += line_size

    if current:
        yield "".join(current)


def output_dir_for(input_path: str, output_root: Optional[str] = None) -> str:
    name = os.path.basename(input_path) + OUTPUT_DIR_SUFFIX
    if output_root is None:
        return name
    return os.path.join(output_root, name)


def chunk_file_name(input_path: str, index: int) -> str:
    stem = os.path.splitext(os.path.basename(input_path))[0]
    return f"{stem}_chunk_{index}.html"


def recreate_dir(path: str):
    shutil.rmtree(path, ignore_errors=True)
    os.makedirs(path, exist_ok=True)


def convert_file(input_path: str, encoding_name=DEFAULT_ENCODING, output_root: Optional[str] = None,
                 target_size=TARGET_HTML_SIZE) -> Generator[ChunkFile, None, None]:
    codec = resolve_encoding(encoding_name)
    if codec is None:
        raise UnsupportedEncodingError(f"Unsupported encoding: {encoding_name}")
    if not os.path.isfile(input_path):
        raise FileNotFoundError(f"File not found - {input_path}")

    file_name = os.path.basename(input_path)

    # newline='\n' keeps lone CRs inside lines, only LF ends a line
    with open(input_path, 'r', encoding=codec.name, errors=DECODE_ERRORS, newline='\n') as f:
        estimated_total = estimate_total_chunks(count_lines(f))
        f.seek(0)
        chunks = list(split_text(read_lines(f), file_name, estimated_total, target_size=target_size))

    output_dir = output_dir_for(input_path, output_root)
    recreate_dir(output_dir)

    actual_total = len(chunks)
    for i, content in enumerate(chunks, start=1):
        document = render_chunk(content, file_name, actual_total, i)
        path = os.path.join(output_dir, chunk_file_name(input_path, i))
        with open(path, 'wb') as out:
            out.write(document)
        yield ChunkFile(i, path, len(document))
