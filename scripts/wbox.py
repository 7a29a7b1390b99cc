import argparse
import os
import sys

from wbox_codec import (
    InputNotFoundError,
    TranscodeResult,
    WboxError,
    read_source,
    suggested_output_name,
    transcode,
    write_output,
)


def _default_dialogs():
    from wbox_dialogs import TkDialogs
    return TkDialogs()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Compress a JSON file into a .wbox container, or decompress a .wbox/.wbax container into pretty-printed JSON."
    )
    parser.add_argument("input_path", type=str, nargs='?', help="Path to the .wbox, .wbax or .json file to convert. A file picker is shown when omitted.")
    parser.add_argument("-o", "--output", dest="output_path", type=str, help="Path to write the result to. A save dialog is shown when omitted.")
    parser.add_argument("--no-pause", action="store_true", help="Exit without waiting for Enter.")
    return parser.parse_args(argv)


def run(args, dialogs=None):
    """Convert one file. Returns None when the operator cancels a dialog."""
    if args.input_path is not None:
        input_path = args.input_path
        if not os.path.exists(input_path):
            raise InputNotFoundError(f"Input file does not exist: {input_path}")
    else:
        dialogs = dialogs or _default_dialogs()
        print("Select the file to be processed...")
        input_path = dialogs.pick_input_path()
        if not input_path:
            print("File is not selected")
            return None

    source = read_source(input_path)
    print(f"\n▌ File selected: {input_path}")
    print(f"▌ File size: {source.size} bytes")
    print(f"▌ File {'is' if source.compressed else 'is not'} compressed")

    if args.output_path is not None:
        output_path = args.output_path
    else:
        dialogs = dialogs or _default_dialogs()
        print("\nSpecify the path to save the file...")
        output_path = dialogs.pick_output_path(
            suggested_output_name(input_path, source.compressed),
            os.path.dirname(os.path.abspath(input_path)),
        )
        if not output_path:
            print("▌ File is not saved")
            return None

    output_size = write_output(output_path, transcode(source))

    action = "decompress" if source.compressed else "compress"
    print(f"\n▌ File has been successfully {action}ed!")
    print(f"▌ Original size: {source.size} bytes")
    print(f"▌ Size after {action}ing: {output_size} bytes")
    print(f"▌ The result is saved in: {output_path}")

    return TranscodeResult(
        compressed=source.compressed,
        input_size=source.size,
        output_size=output_size,
        output_path=output_path,
    )


def wait_for_enter():
    print("\nPress Enter to exit...")
    try:
        input()
    except EOFError:
        pass


def main(argv=None, dialogs=None):
    args = parse_args(argv)

    status = 0
    try:
        run(args, dialogs)
    except WboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        status = 1

    if not args.no_pause:
        wait_for_enter()
    return status


if __name__ == "__main__":
    sys.exit(main())
