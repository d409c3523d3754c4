"""Sample suites: run with ``seedtest run --suites suites:SUITES`` from this directory."""
from seedtest import TEST_COMPLETED, TEST_SKIPPED, TestCase, TestSuite


def _setup(ctx):
    ctx.asserts.passed("Suite setup")


def _teardown(ctx):
    ctx.asserts.passed("Suite teardown")


def add_commutes(ctx):
    a = ctx.fuzzer.random_sint32()
    b = ctx.fuzzer.random_sint32()
    ctx.asserts.check(a + b == b + a, f"{a} + {b} == {b} + {a}")
    return TEST_COMPLETED


def string_roundtrip(ctx):
    text = ctx.fuzzer.random_ascii_string(64)
    ctx.asserts.check(text.encode("ascii").decode("ascii") == text, "ASCII encode/decode roundtrip")
    return TEST_COMPLETED


def not_on_this_platform(ctx):
    return TEST_SKIPPED


def known_broken(ctx):
    value = ctx.fuzzer.random_integer_in_range(1, 10)
    ctx.asserts.check(value > 10, f"{value} > 10")
    return TEST_COMPLETED


MATH_SUITE = TestSuite(
    name="Math",
    cases=[
        TestCase("add_commutes", add_commutes, "Addition of random integers commutes"),
        TestCase("known_broken", known_broken, "Disabled until the range check is fixed", enabled=False),
    ],
    setup=_setup,
    teardown=_teardown,
)

TEXT_SUITE = TestSuite(
    name="Text",
    cases=[
        TestCase("string_roundtrip", string_roundtrip, "Random ASCII strings survive encoding"),
        TestCase("not_on_this_platform", not_on_this_platform, "Always skips itself"),
    ],
)

SUITES = [MATH_SUITE, TEXT_SUITE]
