"""Password validation checks."""
from passablewords.core.constants import MIN_PASSWORD_LENGTH, PasswordError
from passablewords.core.result import ACCEPTED, PasswordCheckResult, rejected
from passablewords.corpus import CommonPasswordCorpus, get_corpus
from passablewords.entropy import EntropyEstimator, check_entropy


def check_length(password: str) -> PasswordCheckResult:
    """
    Check a password is at least MIN_PASSWORD_LENGTH characters long.

    Length counts characters (code points), not encoded bytes.
    """
    if len(password) >= MIN_PASSWORD_LENGTH:
        return ACCEPTED
    return rejected(PasswordError.TOO_SHORT)


def check_uniqueness(
    password: str,
    corpus: CommonPasswordCorpus | None = None,
) -> PasswordCheckResult:
    """
    Check a password is not in the common password corpus.

    Only exact matches count; a single changed character passes.

    Raises:
        CorpusLoadError: If the shared corpus has to be built and cannot be.
    """
    if corpus is None:
        corpus = get_corpus()

    if corpus.contains(password):
        return rejected(PasswordError.TOO_COMMON)
    return ACCEPTED


def check_password(
    password: str,
    corpus: CommonPasswordCorpus | None = None,
    estimator: EntropyEstimator | None = None,
) -> PasswordCheckResult:
    """
    Check length, uniqueness, and entropy in that order.

    Stops at the first failing check, so the cheapest and most obvious
    problem is the one reported.

    Returns:
        ACCEPTED if every check passes, otherwise the first failure.
    """
    result = check_length(password)
    if not result:
        return result

    result = check_uniqueness(password, corpus=corpus)
    if not result:
        return result

    return check_entropy(password, estimator=estimator)
