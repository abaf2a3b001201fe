"""Exception hierarchy for uppercase counting runs."""


class CountError(Exception):
    """
    Base class for errors that abort a counting run.

    Subclasses are raised with a single message argument, which keeps them
    picklable when a worker process sends one back to the coordinator.
    """


class ConfigurationError(CountError):
    """Invalid worker count, worker id, input path, or run usage."""


class FileOpenError(CountError):
    """The input file could not be opened for reading."""


class ReadError(CountError):
    """A worker's range could not be read in full."""


class IncompleteReductionError(CountError):
    """A partial count was missing or duplicated at the reduction."""
