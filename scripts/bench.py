import time

import fire

from utf8str import String


def log(name: str, bytes_length: int, operator: callable):
    a = time.time_ns()
    operator()
    b = time.time_ns()
    secs = (b - a) / 1e9
    mb_per_sec = bytes_length / (1e6 * max(secs, 1e-9))
    print(f"{name}: took {secs:} seconds ~ {mb_per_sec:.3f} MB/s")


def append_native(pieces):
    text = ""
    for piece in pieces:
        text += piece
    return text


def append_buffer(pieces):
    text = String()
    for piece in pieces:
        text.insert(piece)
    return text


def insert_native(text: str, piece: str, count: int):
    for i in range(count):
        position = (i * 7919) % (len(text) + 1)
        text = text[:position] + piece + text[position:]
    return text


def insert_buffer(text: String, piece: str, count: int):
    length = len(text)
    for i in range(count):
        position = (i * 7919) % (length + 1)
        text.insert_at(position, piece)
        length += 1
    return text


def remove_native(text: str, count: int):
    for i in range(count):
        position = (i * 7919) % len(text)
        text = text[:position] + text[position + 1 :]
    return text


def remove_buffer(text: String, count: int):
    length = len(text)
    for i in range(count):
        position = (i * 7919) % length
        text.remove(position)
        length -= 1
    return text


def log_functionality(haystack: str, piece: str, operations: int):
    bytes_length = len(haystack.encode("utf-8"))
    pieces = [piece] * operations

    log("str +=", len(piece.encode("utf-8")) * operations, lambda: append_native(pieces))
    log("String.insert", len(piece.encode("utf-8")) * operations, lambda: append_buffer(pieces))

    log("str slice-insert", bytes_length, lambda: insert_native(haystack, piece, operations))
    log("String.insert_at", bytes_length, lambda: insert_buffer(String(haystack), piece, operations))

    log("str slice-remove", bytes_length, lambda: remove_native(haystack, operations))
    log("String.remove", bytes_length, lambda: remove_buffer(String(haystack), operations))


def bench(
    piece: str = "😊",
    haystack_path: str = None,
    haystack_pattern: str = "llama💬 drÀmÀ ",
    haystack_length: int = 100_000,
    operations: int = 1000,
):
    if haystack_path:
        haystack = String.from_file(haystack_path).as_text()
    else:
        repetitions = int(haystack_length) // len(haystack_pattern)
        haystack = haystack_pattern * repetitions

    operations = min(int(operations), len(haystack) - 1)
    log_functionality(haystack, piece, operations)


if __name__ == "__main__":
    fire.Fire(bench)
