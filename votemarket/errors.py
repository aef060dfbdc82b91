"""Errors raised while generating accounts and managing the vote market."""


class AccountGenError(Exception):
    """Failures while generating test accounts."""


class InvalidCwdError(AccountGenError):
    """The generator was started outside the project root."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid current working directory. Run script from project root directory"
        )


class InvalidAccountDataError(AccountGenError):
    """Stored account data does not decode as the requested account."""

    def __init__(self) -> None:
        super().__init__("Invalid account data")


class VoteMarketManagerError(Exception):
    """Failures of the vote market manager."""


class AddressNotFoundError(VoteMarketManagerError):
    """A required address could not be found."""

    def __init__(self) -> None:
        super().__init__("Address not found")


class PriorityFeeNotInResultError(VoteMarketManagerError):
    """The fee estimate response held no priority fee."""

    def __init__(self) -> None:
        super().__init__("Priority fee not in result")


class SimulationFailedError(VoteMarketManagerError):
    """A transaction simulation reported an error."""

    def __init__(self, sim_info: str) -> None:
        self.sim_info = sim_info
        super().__init__(f"Simulation failed: {sim_info}")


class DatabaseConnectionError(VoteMarketManagerError):
    """The database could not be reached."""

    def __init__(self, error: str) -> None:
        self.error = error
        super().__init__(f"Database connection error: {error}")