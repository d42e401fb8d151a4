import os
import sys

from chunk_template import TemplateRenderError
from txt_split import (DEFAULT_ENCODING, SUPPORTED_ENCODINGS, UnsupportedEncodingError,
                       convert_file, output_dir_for)


def main():
    # Example: python split_txt.py ./novel.txt gbk
    args = sys.argv[1:]
    if not args:
        print("Usage: python split_txt.py <input.txt> [encoding]", file=sys.stderr)
        print("Example: python split_txt.py document.txt gbk", file=sys.stderr)
        sys.exit(1)

    input_file = args[0]
    encoding_name = args[1] if len(args) > 1 else DEFAULT_ENCODING

    if not os.path.exists(input_file):
        print(f"Error: file not found - {input_file}", file=sys.stderr)
        sys.exit(1)

    output_dir = output_dir_for(input_file)
    count = 0
    try:
        size_mb = os.path.getsize(input_file) / 1024 / 1024
        print(f"Processing file: {input_file} ({size_mb:.2f} MB)")
        for chunk in convert_file(input_file, encoding_name):
            print(f"Generated: {chunk.path} (~{chunk.size / 1024:.2f} KB)")
            count += 1
    except UnsupportedEncodingError as e:
        print(f"{e} (supported: {', '.join(SUPPORTED_ENCODINGS)})", file=sys.stderr)
        sys.exit(1)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except TemplateRenderError as e:
        print(f"Template error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"I/O error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Done! {count} files written to {output_dir}")


if __name__ == "__main__":
    main()
