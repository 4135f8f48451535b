"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class ProgramNotFoundError(Exception):
    """Program does not exist or is outside the caller's scope.

    Both cases are reported identically so a caller cannot probe for
    programs belonging to other gyms.
    """

    def __init__(self, program_id: str):
        self.program_id = program_id
        super().__init__(f"Program {program_id} not found")


class ConcurrentModificationError(Exception):
    """Program was written by someone else since it was loaded.

    Raised by ProgramRepository.save when the stored version no longer
    matches the version carried by the Program being saved.
    """

    def __init__(self, program_id: str, expected_version: int):
        self.program_id = program_id
        self.expected_version = expected_version
        super().__init__(
            f"Program {program_id} was modified concurrently "
            f"(expected version {expected_version})"
        )
