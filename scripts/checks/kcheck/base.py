#!/usr/bin/env python3

"""
JUnit representation of fragment results.
"""

from junitparser import Failure, JUnitXml, TestCase, TestSuite


class OptionFailure(Failure):
    """
    A failing option, stored in a formatted standardized manner. 'reason' is
    the fragment's justification, appended to the text when present.
    """

    def __init__(self, fragment, result, reason=None):
        self.fragment = fragment
        self.option = result.name
        self.desired = result.desired_label
        self.observed = result.observed_label
        self.reason = reason

        msg = f"{self.option}: expected {self.desired}, found {self.observed}"
        txt = (
            f"\n{self.option}\nFragment:{fragment}"
            + f"\nDesired:{self.desired}"
            + f"\nKernel:{self.observed}"
            + (f"\nReason:{reason}" if reason else "")
        )

        super().__init__(msg, "failure")

        self.text = txt


class FragmentCase:
    """
    One JUnit test case per fragment. Every failing option becomes a Failure
    on the case, passing fragments produce an empty case.
    """

    classname = "Kconfig"

    def __init__(self, result):
        self.result = result
        self.case = TestCase(result.name, self.classname)
        # Failure subclasses are lost once the case is restored from the
        # element tree, so keep our own references
        self.option_failures = []

        for opt in result.failures:
            self.failure(opt)

    def failure(self, opt):
        fail = OptionFailure(self.result.name, opt, self.result.reason)
        self.case.result += [fail]
        self.option_failures.append(fail)


def build_suite(results, name="Kcheck"):
    """Returns a junitparser TestSuite holding one case per FragmentResult."""
    suite = TestSuite(name)
    for result in results:
        suite.add_testcase(FragmentCase(result).case)
    suite.update_statistics()
    return suite


def write_junit(results, path, name="Kcheck"):
    """Writes 'results' to 'path' in JUnit XML format."""
    xml = JUnitXml()
    xml.add_testsuite(build_suite(results, name))
    xml.update_statistics()
    xml.write(str(path), pretty=True)
