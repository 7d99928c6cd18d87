from digestconv.extraction.models import ConversionResult


def format_result(result: ConversionResult) -> str:
    """Render the four-line conversion report."""
    return "\n".join(
        [
            f"input string:   {result.input_string}",
            f"input encoding: {result.encoding}",
            f"base64-encoded: {result.digest.base64_text}",
            f"hex-encoded:    {result.digest.hex_text}",
        ]
    )
