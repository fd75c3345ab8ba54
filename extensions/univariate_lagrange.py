"""Fast evaluation of the univariate Lagrange extension of a message.

A message of n symbols is read as the values of a polynomial P on the
interpolating set {0, 1, ..., n-1}:

    P(x) = sum_i c_i * L_i(x),    L_i(x) = prod_{j != i} (x - j) / (i - j)

where c_i is the code of the i-th symbol. P has degree at most n-1 and is the
univariate low-degree extension of the message.

Evaluating every L_i(r) from its product definition costs O(n) each, O(n^2)
in total. Because the set is consecutive integers, neighbouring basis values
differ by a ratio of two linear factors and a constant, so after computing
L_0(r) directly each further L_i(r) costs O(1) (Thaler, Proofs, Arguments,
and Zero-Knowledge, eq. 2.10):

    L_i(r) = L_{i-1}(r) * (r - (i-1)) * (-(n-i)) / ((r - i) * i)

That recurrence divides by (r - i), so points inside the interpolating set
never reach it: they are answered by direct lookup.
"""

from typing import Iterable, List, Optional, Type

import galois

from extensions.errors import DomainPointError, EmptyMessageError, InvalidIndexError
from primitives.encoding import Message, encode_message
from primitives.field import FF, as_field_element


def _resolve_field(r, field: Optional[Type[galois.FieldArray]]) -> Type[galois.FieldArray]:
    """Field of ``r`` when it is a field element, else ``field`` (default FF)."""
    if isinstance(r, galois.FieldArray):
        return type(r)
    return field if field is not None else FF


# --- Basis computation ---

def lagrange_basis_at(
    i: int,
    interpolating_set: galois.FieldArray,
    r: galois.FieldArray,
) -> galois.FieldArray:
    """Evaluate the i-th Lagrange basis polynomial at r from its product definition.

    L_i(r) = prod_{j != i} (r - x_j) / (x_i - x_j)

    Args:
        i: Index of the basis polynomial (0 <= i < len(interpolating_set))
        interpolating_set: Interpolation points (must be pairwise distinct)
        r: Evaluation point, an element of the same field

    Returns:
        L_i(r)
    """
    field = type(interpolating_set)
    x_i = field(int(interpolating_set[i]))
    result = field(1)
    for j in range(len(interpolating_set)):
        if j != i:
            x_j = field(int(interpolating_set[j]))
            result = result * (r - x_j) / (x_i - x_j)
    return result


def next_lagrange_basis(
    i: int,
    n: int,
    r: galois.FieldArray,
    previous: galois.FieldArray,
) -> galois.FieldArray:
    """Compute L_i(r) from L_{i-1}(r) over the interpolating set {0, ..., n-1}.

    Args:
        i: Index of the basis polynomial to compute (1 <= i < n)
        n: Size of the interpolating set
        r: Evaluation point, must not be in {0, ..., n-1}
        previous: L_{i-1}(r)

    Returns:
        L_i(r)

    Raises:
        InvalidIndexError: If i < 1 (there is no L_{i-1}) or i >= n
        DomainPointError: If r is an element of the interpolating set
    """
    if i < 1:
        raise InvalidIndexError(
            f"Recurrence needs the (i-1)-th basis value to compute the i-th, got i={i}"
        )
    if i >= n:
        raise InvalidIndexError(f"Basis index {i} is outside the interpolating set of size {n}")
    if 0 <= int(r) <= n - 1:
        raise DomainPointError(
            f"Recurrence requires r outside the interpolating set, got r={int(r)} with n={n}"
        )

    field = type(r)
    return previous * (r - field(i - 1)) * -field(n - i) / ((r - field(i)) * field(i))


def lagrange_basis_values(
    n: int,
    r,
    field: Optional[Type[galois.FieldArray]] = None,
) -> List[galois.FieldArray]:
    """Return [L_0(r), ..., L_{n-1}(r)] for the interpolating set {0, ..., n-1}.

    Inside the set the basis is the indicator of r. The values always sum to 1.

    Raises:
        EmptyMessageError: If n < 1
    """
    if n < 1:
        raise EmptyMessageError(f"Interpolating set must be non-empty, got n={n}")
    field = _resolve_field(r, field)
    r = as_field_element(r, field)

    if int(r) < n:
        return [field(1) if i == int(r) else field(0) for i in range(n)]

    basis = lagrange_basis_at(0, field(list(range(n))), r)
    values = [basis]
    for i in range(1, n):
        basis = next_lagrange_basis(i, n, r, basis)
        values.append(basis)
    return values


# --- Evaluation ---

def evaluate_coefficients(coefficients: galois.FieldArray, r) -> galois.FieldArray:
    """Evaluate the extension of an encoded data vector at r in O(n).

    Args:
        coefficients: 1-d field array, c[i] is the value at point i
        r: Field element of the same field, or an int (reduced modulo p)

    Returns:
        P(r)

    Raises:
        EmptyMessageError: If the vector is empty
    """
    n = len(coefficients)
    if n == 0:
        raise EmptyMessageError()
    field = type(coefficients)
    r = as_field_element(r, field)

    # r is an interpolation point: the value is tabulated
    if int(r) < n:
        return field(int(coefficients[int(r)]))

    result = field(0)
    basis = lagrange_basis_at(0, field(list(range(n))), r)

    for i in range(n):
        result = result + field(int(coefficients[i])) * basis
        if i < n - 1:
            basis = next_lagrange_basis(i + 1, n, r, basis)

    return result


def evaluate_univariate_extension(
    message: Message,
    r,
    field: Optional[Type[galois.FieldArray]] = None,
    encoding: str = "ascii",
) -> galois.FieldArray:
    """Evaluate the univariate Lagrange extension of ``message`` at ``r``.

    The symbol codes of the message are the values of the polynomial at
    0, 1, ..., n-1. When r is one of those points the code of message[r] is
    returned without building the polynomial.

    Args:
        message: str, bytes or sequence of ints (see primitives.encoding)
        r: Field element, or an int reduced modulo the field order
        field: Field to use when r is an int (default: Goldilocks)
        encoding: Symbol encoding for str messages, "ascii" or "codepoint"

    Returns:
        P(r), an element of the field of r

    Raises:
        EmptyMessageError: If the message is empty
        UnmappedSymbolError: If a symbol has no code in the encoding
    """
    n = len(message)
    if n == 0:
        raise EmptyMessageError()
    field = _resolve_field(r, field)
    r = as_field_element(r, field)

    if int(r) < n:
        index = int(r)
        return field(int(encode_message(message[index:index + 1], field, encoding)[0]))

    return evaluate_coefficients(encode_message(message, field, encoding), r)


def evaluate_at_points(
    message: Message,
    points: Iterable,
    field: Optional[Type[galois.FieldArray]] = None,
    encoding: str = "ascii",
) -> galois.FieldArray:
    """Evaluate the extension of ``message`` at each point, encoding the message once.

    Returns:
        1-d field array with P(points[k]) at position k
    """
    if len(message) == 0:
        raise EmptyMessageError()
    points = list(points)
    field = _resolve_field(points[0] if points else None, field)
    coefficients = encode_message(message, field, encoding)
    if not points:
        return field.Zeros(0)
    return field([int(evaluate_coefficients(coefficients, p)) for p in points])


def evaluate_lagrange_naive(coefficients: galois.FieldArray, r) -> galois.FieldArray:
    """Reference O(n^2) evaluation straight from the Lagrange formula.

    No short-circuit and no recurrence; used to cross-check the fast path.
    """
    n = len(coefficients)
    if n == 0:
        raise EmptyMessageError()
    field = type(coefficients)
    r = as_field_element(r, field)
    interpolating_set = field(list(range(n)))

    result = field(0)
    for i in range(n):
        result = result + field(int(coefficients[i])) * lagrange_basis_at(i, interpolating_set, r)
    return result
