"""Policy deciding the default flag of a new account."""


def resolve_default_flag(existing_accounts: int, requested: bool) -> bool:
    """Return the default flag a new account must receive.

    A user's first account always becomes the default so that every user
    with at least one account has exactly one default.

    Args:
        existing_accounts: Number of accounts the owner already has.
        requested: Default flag asked for by the caller.

    Returns:
        bool: Effective default flag.
    """
    if existing_accounts == 0:
        return True
    return bool(requested)


__all__ = ["resolve_default_flag"]
