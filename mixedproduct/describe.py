"""
Text descriptions of combinations.
"""
from functools import reduce


def join_with(separator):
    """
    Returns a joinf for generate_desc that puts separator between parts.
    """
    def joinf(a, b):
        return a + separator + b
    return joinf


def generate_desc(joinf, combination):
    """
    Generates the text description of a combination.  Elements that are
    themselves combinations (a product fed into another product) are
    rendered as {a b} groups.
    """
    if type(combination) is tuple:
        parts = [_desc_item(joinf, i) for i in combination]
        if not parts:
            return ''
        return reduce(joinf, parts)
    return str(combination)


def _desc_item(joinf, item):
    if type(item) is tuple:
        return '{' + ' '.join([_desc_item(joinf, i) for i in item]) + '}'
    return str(item)
