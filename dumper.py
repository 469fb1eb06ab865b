import hexify

COLUMNS = (8, 16, 32, 64)
SECTION_ROWS = 16


class DumpError(Exception):
    def __init__(self, message, name=None, address=None):
        super().__init__(message)
        self.message = message
        self.name = name
        self.address = address

    def __str__(self):
        text = self.message
        if self.name is not None:
            text = f"{self.name}: {text}"
        if self.address is not None:
            text = f"{text} at 0x{self.address:08x}"
        return text


class ConfigurationError(DumpError):
    pass


class SourceReadError(DumpError):
    pass


class SinkWriteError(DumpError):
    pass


def check_columns(columns):
    if columns not in COLUMNS:
        raise ConfigurationError(
            f"columns must be one of {', '.join(map(str, COLUMNS))}, not {columns}")
    return columns


class Dumper:
    """Reads a byte source chunk by chunk and turns it into dump lines.

    The header comes first, then one line per chunk of up to `columns`
    bytes. Every SECTION_ROWS rows, starting with the first, a blank line
    separates the sections. `address` and `rows` track the progress and are
    only advanced after a chunk has been read successfully.
    """

    def __init__(self, columns, name="<input>"):
        self.columns = check_columns(columns)
        self.name = name
        self.hexifier = hexify.Hexify(columns)
        self.reset()

    def reset(self):
        self.address = 0
        self.rows = 0

    def read_chunk(self, source):
        try:
            return source.read(self.columns)
        except OSError as e:
            raise SourceReadError(f"read failed: {e}", self.name, self.address) from e

    def hexify_stream(self, source):
        self.reset()
        yield self.hexifier.header()
        while True:
            chunk = self.read_chunk(source)
            if not chunk:
                break
            if self.rows % SECTION_ROWS == 0:
                yield "\n"
            yield self.hexifier.hexify_chunk(chunk, self.address)
            self.address += len(chunk)
            self.rows += 1

    def dump(self, source, sink, sink_name="<output>"):
        for line in self.hexify_stream(source):
            try:
                sink.write(line)
            except OSError as e:
                raise SinkWriteError(f"write failed: {e}", sink_name, self.address) from e
        return self.address
