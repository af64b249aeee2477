# -*- coding: utf-8 -*-
from restrack import UrlChain


def test_from_path_drops_empty_segments():
    chain = UrlChain.from_path('/widgets/42/parts/')
    assert len(chain) == 3
    assert chain.shift() == 'widgets'
    assert chain.shift() == '42'
    assert chain.shift() == 'parts'
    assert chain.shift() is None


def test_shift_on_empty_chain():
    chain = UrlChain()
    assert chain.shift() is None
    assert chain.peek() is None
    assert len(chain) == 0


def test_unshift_goes_in_front():
    chain = UrlChain(['show'])
    chain.unshift(777)
    assert chain.peek() == 777
    assert len(chain) == 2
    assert chain.shift() == 777
    assert chain.shift() == 'show'


def test_peek_does_not_consume():
    chain = UrlChain.from_path('/a/b')
    assert chain.peek() == 'a'
    assert chain.peek() == 'a'
    assert len(chain) == 2


def test_repr():
    assert repr(UrlChain(['a', 1])) == "<UrlChain ['a', 1]>"
