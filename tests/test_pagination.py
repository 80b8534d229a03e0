#!/usr/bin/env python3
# Test Pagination Math

import unittest
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from hutupy.paging.pagination import page_to_range, total_pages, page_rainbow

class TestPagination(unittest.TestCase):

    def test_page_to_range(self):
        """Test page index range."""
        self.assertEqual(page_to_range(1, 10), (0, 10))
        self.assertEqual(page_to_range(2, 10), (10, 20))
        self.assertEqual(page_to_range(5, 20), (80, 100))

    def test_total_pages(self):
        """Test page count."""
        self.assertEqual(total_pages(9, 3), 3)
        self.assertEqual(total_pages(10, 5), 2)
        self.assertEqual(total_pages(10, 3), 4)
        self.assertEqual(total_pages(20, 3), 7)
        self.assertEqual(total_pages(0, 10), 0)
        self.assertEqual(total_pages(1, 10), 1)

    def test_total_pages_rejects_non_positive_size(self):
        """Test page count with a non-positive size."""
        for size in (0, -3):
            with self.assertRaises(ValueError):
                total_pages(10, size)

    def test_rainbow_window_positions(self):
        """Test pager window positions."""
        self.assertEqual(page_rainbow(1, 10, 5), [1, 2, 3, 4, 5])
        self.assertEqual(page_rainbow(5, 10, 5), [3, 4, 5, 6, 7])
        self.assertEqual(page_rainbow(10, 10, 5), [6, 7, 8, 9, 10])

    def test_rainbow_fewer_pages_than_window(self):
        """Test pager with fewer pages than the window."""
        self.assertEqual(page_rainbow(2, 5, 10), [1, 2, 3, 4, 5])
        self.assertEqual(page_rainbow(5, 5, 5), [1, 2, 3, 4, 5])
        self.assertEqual(page_rainbow(1, 0, 5), [])

    def test_rainbow_even_window(self):
        """Test pager with an even window."""
        self.assertEqual(page_rainbow(5, 20, 6), [3, 4, 5, 6, 7, 8])
        self.assertEqual(page_rainbow(20, 20, 6), [15, 16, 17, 18, 19, 20])

    def test_rainbow_stays_in_bounds(self):
        """Test pager stays within page bounds."""
        for page in range(1, 13):
            window = page_rainbow(page, 12, 4)
            self.assertEqual(len(window), 4)
            self.assertIn(page, window)
            self.assertGreaterEqual(window[0], 1)
            self.assertLessEqual(window[-1], 12)

if __name__ == '__main__':
    unittest.main()
