"""Line wrapping for console output."""

# Column width for console output
LINE_WRAP_LENGTH = 70


def wrap(text: str, width: int = LINE_WRAP_LENGTH) -> str:
    """Wrap text to width columns.

    While the remaining text is at least width long, break at the first
    newline if it comes before the wrap column (keeping it), else at a space
    sitting exactly on the wrap column (dropping it), else at the last space
    before the column, else at the first space after it. Text with no space
    at all is left unbroken. A break inserted at a space only adds a newline
    when more text follows.
    """
    output: list[str] = []

    while len(text) >= width:
        newline = text.find("\n")
        if 0 <= newline < width:
            output.append(text[: newline + 1])
            text = text[newline + 1 :]
            continue

        if len(text) > width and text[width] == " ":
            cut = width
        else:
            cut = text.rfind(" ", 0, width)
            if cut == -1:
                cut = text.find(" ")
            if cut == -1:
                output.append(text)
                text = ""
                break

        output.append(text[:cut])
        text = text[cut + 1 :]
        if text:
            output.append("\n")

    output.append(text)
    return "".join(output)
