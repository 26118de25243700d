"""Tests for the complex matrix products."""
import numpy as np
import pytest

from LINALGtools.funcs.complex_mat import Times, Z, Zmat, Zdiagmat
from LINALGtools.funcs.exceptions import NonConformableError


def assert_zmat_close(actual, expected, atol=1e-12):
    np.testing.assert_allclose(actual.to_complex(), expected, atol=atol, rtol=1e-12)


# ---------------------------------------------------------------------------
# Scalar products
# ---------------------------------------------------------------------------

class TestScalarTimesMatrix:

    def test_matches_numpy(self, times, random_zmat):
        A = random_zmat(3, 4)
        z = Z(0.5, -2.0)
        B = times.scalar_times_matrix(z, A)
        assert B.shape == (3, 4)
        assert_zmat_close(B, complex(z) * A.to_complex())

    def test_unit_scalar_is_exact_identity(self, times, random_zmat):
        A = random_zmat(4, 3)
        B = times.scalar_times_matrix(Z(1.0, 0.0), A)
        assert B == A

    def test_accepts_python_complex(self, times, random_zmat):
        A = random_zmat(2, 2)
        assert times.scalar_times_matrix(1j, A) == times.scalar_times_matrix(Z(0, 1), A)

    @pytest.mark.parametrize("z", [np.complex64(2j), np.complex128(2j)])
    def test_accepts_numpy_complex_scalar(self, times, z):
        A = Zmat(np.ones((2, 2)), np.zeros((2, 2)))
        B = times.scalar_times_matrix(z, A)
        np.testing.assert_array_equal(B.re, np.zeros((2, 2)))
        np.testing.assert_array_equal(B.im, np.full((2, 2), 2.0))

    def test_operand_not_modified(self, times, random_zmat):
        A = random_zmat(3, 3)
        before = Zmat(A)
        B = times.scalar_times_matrix(Z(3.0, 1.0), A)
        assert A == before
        assert B.re is not A.re


class TestScalarTimesDiagonal:

    def test_matches_numpy(self, times, random_zdiagmat):
        D = random_zdiagmat(5)
        z = Z(-1.5, 0.25)
        out = times.scalar_times_diagonal(z, D)
        assert isinstance(out, Zdiagmat)
        assert out.order == 5
        expected = complex(z) * (D.re + 1j * D.im)
        np.testing.assert_allclose(out.re + 1j * out.im, expected, atol=1e-12)


# ---------------------------------------------------------------------------
# Matrix products
# ---------------------------------------------------------------------------

class TestMatrixTimesMatrix:

    def test_matches_numpy(self, times, random_zmat):
        A = random_zmat(3, 5)
        B = random_zmat(5, 2)
        C = times.matrix_times_matrix(A, B)
        assert C.shape == (3, 2)
        assert_zmat_close(C, A.to_complex() @ B.to_complex())

    def test_unconformable_operands_raise(self, times, random_zmat):
        A = random_zmat(2, 3)
        B = random_zmat(4, 2)
        with pytest.raises(NonConformableError) as excinfo:
            times.matrix_times_matrix(A, B)
        assert excinfo.value.operation == "matrix_times_matrix"

    def test_numba_and_numpy_agree(self, random_zmat):
        A = random_zmat(6, 4)
        B = random_zmat(4, 7)
        C_nb = Times(use_numba=True).matrix_times_matrix(A, B)
        C_np = Times(use_numba=False).matrix_times_matrix(A, B)
        np.testing.assert_allclose(C_nb.to_complex(), C_np.to_complex(), atol=1e-12)


class TestHermitianProducts:

    @pytest.mark.parametrize("shape", [(5, 3), (3, 5), (4, 4), (1, 6)])
    def test_aha_is_exactly_hermitian(self, times, random_zmat, shape):
        A = random_zmat(*shape)
        C = times.hermitian_aha(A)
        nc = shape[1]
        assert C.shape == (nc, nc)
        for i in range(nc):
            assert C.im[i, i] == 0.0
            for j in range(nc):
                assert C.re[i, j] == C.re[j, i]
                assert C.im[i, j] == -C.im[j, i]

    @pytest.mark.parametrize("shape", [(5, 3), (3, 5), (4, 4), (6, 1)])
    def test_aah_is_exactly_hermitian(self, times, random_zmat, shape):
        A = random_zmat(*shape)
        C = times.hermitian_aah(A)
        nr = shape[0]
        assert C.shape == (nr, nr)
        np.testing.assert_array_equal(C.re, C.re.T)
        np.testing.assert_array_equal(C.im, -C.im.T)
        np.testing.assert_array_equal(np.diag(C.im), np.zeros(nr))

    def test_aha_matches_conjugate_transpose_product(self, times, random_zmat):
        A = random_zmat(5, 3)
        a = A.to_complex()
        assert_zmat_close(times.hermitian_aha(A), a.conj().T @ a)

    def test_aah_matches_conjugate_transpose_product(self, times, random_zmat):
        A = random_zmat(3, 5)
        a = A.to_complex()
        assert_zmat_close(times.hermitian_aah(A), a @ a.conj().T)


# ---------------------------------------------------------------------------
# Diagonal products
# ---------------------------------------------------------------------------

class TestDiagonalProducts:

    def test_diagonal_times_matrix_scales_rows(self, times, random_zmat):
        D = Zdiagmat(np.array([2.0 + 0j, 3.0 + 0j]))
        A = random_zmat(2, 2)
        B = times.diagonal_times_matrix(D, A)
        np.testing.assert_array_equal(B.re[0], 2 * A.re[0])
        np.testing.assert_array_equal(B.im[0], 2 * A.im[0])
        np.testing.assert_array_equal(B.re[1], 3 * A.re[1])
        np.testing.assert_array_equal(B.im[1], 3 * A.im[1])

    def test_matrix_times_diagonal_matches_dense_product(self, times, random_zmat, random_zdiagmat):
        A = random_zmat(4, 3)
        D = random_zdiagmat(3)
        B = times.matrix_times_diagonal(A, D)
        assert_zmat_close(B, A.to_complex() @ D.to_zmat().to_complex())

    def test_diagonal_times_matrix_matches_dense_product(self, times, random_zmat, random_zdiagmat):
        A = random_zmat(3, 4)
        D = random_zdiagmat(3)
        B = times.diagonal_times_matrix(D, A)
        assert_zmat_close(B, D.to_zmat().to_complex() @ A.to_complex())

    def test_diagonal_times_diagonal(self, times, random_zdiagmat):
        D1 = random_zdiagmat(4)
        D2 = random_zdiagmat(4)
        D3 = times.diagonal_times_diagonal(D1, D2)
        expected = (D1.re + 1j * D1.im) * (D2.re + 1j * D2.im)
        np.testing.assert_allclose(D3.re + 1j * D3.im, expected, atol=1e-12)

    def test_diagonal_order_mismatch_raises(self, times, random_zdiagmat):
        with pytest.raises(NonConformableError) as excinfo:
            times.diagonal_times_diagonal(random_zdiagmat(3), random_zdiagmat(4))
        assert excinfo.value.operation == "diagonal_times_diagonal"

    def test_diagonal_times_matrix_mismatch_raises(self, times, random_zmat, random_zdiagmat):
        with pytest.raises(NonConformableError):
            times.diagonal_times_matrix(random_zdiagmat(3), random_zmat(2, 3))

    def test_matrix_times_diagonal_mismatch_raises(self, times, random_zmat, random_zdiagmat):
        with pytest.raises(NonConformableError):
            times.matrix_times_diagonal(random_zmat(3, 2), random_zdiagmat(3))


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class TestDispatch:

    def test_o_dispatches_on_operand_types(self, times, random_zmat, random_zdiagmat):
        A = random_zmat(3, 3)
        D = random_zdiagmat(3)
        z = Z(1.0, 2.0)
        assert times.o(z, A) == times.scalar_times_matrix(z, A)
        assert times.o(z, D) == times.scalar_times_diagonal(z, D)
        assert times.o(A, A) == times.matrix_times_matrix(A, A)
        assert times.o(A, D) == times.matrix_times_diagonal(A, D)
        assert times.o(D, A) == times.diagonal_times_matrix(D, A)
        assert times.o(D, D) == times.diagonal_times_diagonal(D, D)

    @pytest.mark.parametrize("z", [np.complex64(1 - 1j), np.float32(3.0), np.int64(2)])
    def test_o_accepts_numpy_scalars(self, times, random_zmat, random_zdiagmat, z):
        A = random_zmat(2, 2)
        D = random_zdiagmat(2)
        assert times.o(z, A) == times.scalar_times_matrix(complex(z), A)
        assert times.o(z, D) == times.scalar_times_diagonal(complex(z), D)

    def test_o_rejects_unsupported_operands(self, times, random_zmat):
        with pytest.raises(TypeError):
            times.o(random_zmat(2, 2), 2.0)
