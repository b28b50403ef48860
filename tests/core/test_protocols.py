"""
Tests for the Backend protocol.
"""

from pylsq.core import Backend
from pylsq.regression.backends import CPULinearBackend, CPUPolynomialBackend


class TestBackendProtocol:

    def test_cpu_backends_conform(self):
        assert isinstance(CPULinearBackend(), Backend)
        assert isinstance(CPUPolynomialBackend('normal'), Backend)
        assert isinstance(CPUPolynomialBackend('qr'), Backend)

    def test_names_follow_convention(self):
        for backend in (CPULinearBackend(), CPUPolynomialBackend('normal'), CPUPolynomialBackend('qr')):
            assert backend.name.startswith('cpu_')

    def test_plain_object_does_not_conform(self):
        assert not isinstance(object(), Backend)
