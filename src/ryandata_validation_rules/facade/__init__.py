from ryandata_validation_rules.facade.manager import Manager, get_default_manager, make

__all__ = [
    "Manager",
    "get_default_manager",
    "make",
]
