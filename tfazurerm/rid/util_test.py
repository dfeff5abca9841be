"""Tests for the utilities"""

from hypothesis import given
from hypothesis.strategies import characters, lists, text

from tfazurerm.rid.util import SegmentAndPathIterable, split_rid


class TestSegmentAndPathIterable:
	"""Test the SegmentAndPathIterable"""

	def test_no_results(self):
		s = "/hihello"
		r = list(iter(SegmentAndPathIterable(s)))
		assert r == [(s, s[1:])]

	def test_leading(self):
		s = "/0"
		r = list(iter(SegmentAndPathIterable(s)))
		assert r == [("/0", "0")]

	def test_no_leading(self):
		s = "0/1"
		r = list(iter(SegmentAndPathIterable(s)))
		assert r == [("0", "0"), ("0/1", "1")]

	def test_trailing(self):
		"""Should have an empty segment at the end"""
		s = "/0/"
		r = list(iter(SegmentAndPathIterable(s)))
		assert r == [("/0", "0"), ("/0/", "")]

	def test_multiple(self):
		s = "/0/1"
		r = list(iter(SegmentAndPathIterable(s)))
		assert r == [("/0", "0"), ("/0/1", "1")]

	@given(lists(text(alphabet=characters(exclude_characters="/")), min_size=1))
	def test_hypothesis(self, segments):
		s = "/" + "/".join(segments)
		r = list(iter(SegmentAndPathIterable(s)))
		assert [x[1] for x in r] == segments


class TestSplit:
	"""Test splitting into tokens"""

	def test_simple(self):
		t = split_rid("/a/b")
		assert t.values == ("a", "b")
		assert not t.trailing_separator

	def test_trailing(self):
		t = split_rid("/a/b/")
		assert t.values == ("a", "b")
		assert t.trailing_separator

	def test_only_one_trailing_dropped(self):
		t = split_rid("/a//")
		assert t.values == ("a", "")
		assert t.trailing_separator

	def test_internal_empty_kept(self):
		assert split_rid("/a//b").values == ("a", "", "b")

	def test_matched_before(self):
		t = split_rid("/a/b/c")
		assert t.matched_before(0) == ""
		assert t.matched_before(2) == "/a/b"
		assert t.matched_before(5) == "/a/b/c"
