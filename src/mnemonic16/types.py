from typing import Literal

ByteFormat = Literal["hex", "base64", "raw"]
