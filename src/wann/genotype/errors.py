"""
WANN Error Module

Classes:
    StructuralMutationError: A structural edit was rejected (expected, recoverable)
    InternalConsistencyError: A network or population invariant was broken (fatal)
"""

class StructuralMutationError(ValueError):
    """
    Raised by the network edit primitives when a requested edit is invalid:
    the edge to split does not exist, the connection already exists, or the
    connection would create a cycle. The mutation engine absorbs these errors
    through its retry/fallback policies; they never escape 'Network.modify()'.
    """

class InternalConsistencyError(RuntimeError):
    """
    Raised when an invariant that correct code always maintains is found to be
    broken (dangling neuron index, no best individual after scoring, ...).
    Never caught inside the package.
    """
