from pico.reader.parser import CharStream, Reader, read_string
