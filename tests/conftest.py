"""Tree builders shared by the compiler tests.

Trees are assembled by hand from lark.Tree and lark.Token, the same node
types the prompt parser hands to the compiler.
"""

from lark import Token, Tree

from a1111_prompt_ir import PLAIN_TEXT


def text(value):
    return Token(PLAIN_TEXT, value)


def plain(value):
    return Tree("plain", [text(value)])


def number(value):
    return Tree("number", [Token("NUMBER", value)])


def combination(*children):
    return Tree("combination", list(children))


def multiple(*children):
    return Tree("multiple", list(children))


def start(*children):
    return Tree("start", list(children))


def positive(child):
    return Tree("emphasized_positive", [child])


def negative(child):
    return Tree("emphasized_negative", [child])


def weighted(child, weight):
    return Tree("emphasized_weighted", [child, number(weight)])


def alternate(*children):
    return Tree("alternate", list(children))


def scheduled(kind, child, when):
    return Tree(kind, [child, number(when)])


def scheduled_full(before, after, when):
    return Tree("scheduled_full", [before, after, number(when)])


def network_name(name):
    return Tree("extra_networks_name", [Token("NAME", name)])


def extra_networks(name, *args):
    return Tree(
        "extra_networks",
        [network_name(name), Tree("extra_networks_args", [Token("ARG", a) for a in args])],
    )
