"""Tests for segment lookup."""

import torch


def _linear_scan(knots, t):
    """Index of the first segment whose right knot lies beyond t."""
    n_segments = len(knots) - 1
    for i in range(n_segments):
        if t < knots[i + 1]:
            return i
    return n_segments - 1


class TestLocateSegment:
    def test_matches_linear_scan(self):
        """Test binary search against a left-to-right scan on 10 uniform knots."""
        from torchspline._locate_segment import locate_segment

        knots = torch.linspace(0, 9, 10, dtype=torch.float64)

        generator = torch.Generator().manual_seed(0)
        fractions = 0.01 + 0.98 * torch.rand(
            9, 20, dtype=torch.float64, generator=generator
        )
        t = (knots[:-1].unsqueeze(-1) + fractions).flatten()

        idx = locate_segment(knots, t)
        expected = torch.tensor(
            [_linear_scan(knots.tolist(), q) for q in t.tolist()]
        )

        assert torch.equal(idx, expected)
        # Every query is strictly inside the segment it was built from
        assert torch.equal(idx, torch.arange(9).repeat_interleave(20))

    def test_knots_start_their_segment(self):
        from torchspline._locate_segment import locate_segment

        knots = torch.linspace(0, 9, 10, dtype=torch.float64)

        idx = locate_segment(knots, knots)

        expected = torch.tensor([0, 1, 2, 3, 4, 5, 6, 7, 8, 8])
        assert torch.equal(idx, expected)

    def test_out_of_domain_uses_boundary_segments(self):
        from torchspline._locate_segment import locate_segment

        knots = torch.tensor([0.0, 0.5, 2.0, 3.0], dtype=torch.float64)
        t = torch.tensor([-10.0, -1e-12, 3.0 + 1e-12, 100.0], dtype=torch.float64)

        idx = locate_segment(knots, t)

        assert torch.equal(idx, torch.tensor([0, 0, 2, 2]))

    def test_decreasing_knots(self):
        from torchspline._locate_segment import locate_segment

        knots = torch.tensor([3.0, 2.0, 0.5, 0.0], dtype=torch.float64)
        t = torch.tensor([4.0, 3.0, 2.5, 2.0, 1.0, 0.0, -1.0], dtype=torch.float64)

        idx = locate_segment(knots, t)

        assert torch.equal(idx, torch.tensor([0, 0, 0, 1, 1, 2, 2]))

    def test_preserves_query_shape(self):
        from torchspline._locate_segment import locate_segment

        knots = torch.linspace(0, 1, 5, dtype=torch.float64)
        t = torch.rand(3, 4, dtype=torch.float64)

        assert locate_segment(knots, t).shape == (3, 4)
