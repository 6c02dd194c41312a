"""
Error taxonomy for the ranking pipeline.

Every error is fatal: it is raised where it is detected and propagated
up to the CLI, which reports it and exits with a non-zero status.
"""


class RankingError(Exception):
    """Base exception for all ranking pipeline errors"""
    pass


class ArgumentError(RankingError):
    """No input path was supplied on the command line"""
    pass


class FileAccessError(RankingError):
    """The input file could not be opened for reading"""
    pass


class FormatError(RankingError):
    """The header row is missing or does not have the required columns"""
    pass


class ParseError(RankingError):
    """A data row could not be read or its score is not an integer"""
    pass
