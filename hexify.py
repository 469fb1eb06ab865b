class Hexify:
    """Renders rows of raw bytes as hex dump lines.

    A row is `columns` bytes wide and split into blocks of `block_size`
    bytes. Each line carries the address, the hex channel (blocks joined by
    two spaces) and the text channel (blocks run together):

        0xdeadbeef  30 31 32 33 .. .. .. ..  .. .. .. .. .. .. .. ..  0123............
    """

    def __init__(self, columns, block_size=8):
        self.columns = columns
        self.block_size = block_size
        self.printables = list(map(self.printable, range(256)))
        self.hex = list(map("{:02X}".format, range(256)))
        self.blank_address = ' ' * 10
        self.blank_text = ' ' * columns

    def printable(self, c):
        return chr(c) if 32 <= c < 127 else '.'

    def blocks(self, chunk):
        # Positions past the end of the chunk come out as fully padded blocks.
        for i in range(0, self.columns, self.block_size):
            items = chunk[i:i + self.block_size]
            yield items, self.block_size - len(items)

    def render(self, chunk, table, filler, separator, joiner):
        return joiner.join(
            separator.join([table[x] for x in items] + [filler] * pad)
            for items, pad in self.blocks(chunk))

    def hexify_blocks(self, chunk):
        return self.render(chunk, self.hex, '..', ' ', '  ')

    def textify_blocks(self, chunk):
        return self.render(chunk, self.printables, '.', '', '')

    def hexify_address(self, address):
        return f"0x{address & 0xffffffff:08x}"

    def row(self, address, dump, char):
        return f"{address}  {dump}  {char}\n"

    def header(self):
        legend = self.hexify_blocks(bytes(range(self.columns)))
        return self.row(self.blank_address, legend, self.blank_text).lower()

    def hexify_chunk(self, chunk, address):
        return self.row(
            self.hexify_address(address),
            self.hexify_blocks(chunk),
            self.textify_blocks(chunk))
