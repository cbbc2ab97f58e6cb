from enum import Enum


class AssemblerState(str, Enum):
    IDLE = "idle"
    PROCESSING_FILE = "processing_file"
    GENERATING = "generating"
    FAILED = "failed"
