"""
Core protocols for pylsq.

We use Protocol (structural typing) rather than ABC (nominal typing):
a backend is anything with a name and a solve(design) method.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pylsq.core.result import Result

P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter payload
    wrapped in a Result. Backends hold no per-fit state; configuration
    (e.g. the solve method) is fixed at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_linear', 'cpu_normal_equations', 'cpu_qr'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
        """
        ...
