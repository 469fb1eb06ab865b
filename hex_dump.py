import os
import sys
import getopt
import datetime
import collections

import dumper

version = "Hex Dump  Version 1.00"

exe = os.path.basename(sys.argv[0])
usage_msg = f"""
Usage: {exe} -i input [-c columns] [-o output] [-q] [-?] [-v]

Options:
  -i, --input input       - file to dump
  -c, --columns columns   - bytes per row: 8, 16, 32 or 64 (default 16)
  -o, --output output     - output file, "-" for stdout (default: input + ".dump")
  -q, --quiet             - suppress log messages
  -?, --help              - this help
  -v, --version           - version
"""

Options = collections.namedtuple('Options', 'input output columns quiet')

flag_quiet = False


def usage():
    print(usage_msg)
    sys.exit(1)


def now_prefix():
    return datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def log(msg):
    if not flag_quiet:
        print(f"{now_prefix()} {msg}", file=sys.stderr)


def same_file(a, b):
    if os.path.realpath(a) == os.path.realpath(b):
        return True
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


def parse_args(argv):
    opts, args = getopt.getopt(
        argv, "i:c:o:q?v", ["input=", "columns=", "output=", "quiet", "help", "version"])

    input = output = None
    columns = 16
    quiet = False

    for opt, val in opts:
        if opt in ("-i", "--input"):
            input = val
        elif opt in ("-c", "--columns"):
            try:
                columns = int(val)
            except ValueError:
                raise dumper.ConfigurationError(f"columns is not a number: {val}")
        elif opt in ("-o", "--output"):
            output = val
        elif opt in ("-q", "--quiet"):
            quiet = True
        elif opt in ("-?", "--help"):
            usage()
        elif opt in ("-v", "--version"):
            print(version)
            sys.exit(1)

    if args:
        raise dumper.ConfigurationError(f"unexpected arguments: {' '.join(args)}")

    if not input:
        raise dumper.ConfigurationError("input file is not given")

    dumper.check_columns(columns)

    output = output or f"{input}.dump"
    if output != "-" and same_file(input, output):
        raise dumper.ConfigurationError(f"output would overwrite the input: {output}")

    return Options(input, output, columns, quiet)


def open_input(name):
    try:
        return open(name, 'rb')
    except OSError as e:
        raise dumper.SourceReadError(f"cannot open: {e.strerror}", name) from e


def open_output(name):
    if name == "-":
        return sys.stdout
    try:
        return open(name, 'w')
    except OSError as e:
        raise dumper.SinkWriteError(f"cannot create: {e.strerror}", name) from e


def close_output(sink, name):
    try:
        sink.close()
    except OSError as e:
        raise dumper.SinkWriteError(f"cannot close: {e.strerror}", name) from e


def discard_output(sink, name):
    try:
        sink.close()
    except OSError as e:
        log(f"ERROR: {name}: cannot close: {e.strerror}")


def run(options):
    started = datetime.datetime.now()
    log(f"Starting dump of {options.input} ({options.columns} columns) to {options.output}")

    d = dumper.Dumper(options.columns, options.input)
    with open_input(options.input) as source:
        sink = open_output(options.output)
        try:
            d.dump(source, sink, options.output)
        except dumper.DumpError:
            if sink is not sys.stdout:
                discard_output(sink, options.output)
            raise
        if sink is not sys.stdout:
            close_output(sink, options.output)

    duration = datetime.datetime.now() - started
    log(f"Dumped {d.address} byte(s) in {d.rows} row(s), duration {duration}")


def main(argv=None):
    global flag_quiet

    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_args(argv)
    except (getopt.GetoptError, dumper.ConfigurationError) as e:
        print(f"error: {e}\n")
        usage()

    flag_quiet = options.quiet

    try:
        run(options)
    except dumper.DumpError as e:
        log(f"ERROR: {e}")
        return 1
    finally:
        log("End dump")

    return 0


if __name__ == "__main__":
    sys.exit(main())
