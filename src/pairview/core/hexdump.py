BYTES_ARRAY_ROW_LENGTH = 16


def bytes_to_hex_dump(data: bytes) -> str:
    """Render bytes as rows of 16 uppercase hex pairs, one row per line.

    >>> bytes_to_hex_dump(b"\\x00\\xffA")
    '00 FF 41\\n'
    """
    rows = []
    for start in range(0, len(data), BYTES_ARRAY_ROW_LENGTH):
        chunk = data[start:start + BYTES_ARRAY_ROW_LENGTH]
        rows.append(" ".join(f"{byte:02X}" for byte in chunk) + "\n")
    return "".join(rows)
