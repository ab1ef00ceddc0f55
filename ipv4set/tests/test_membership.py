import pytest

from ipv4set.codec import InvalidAddressFormat


def test_scenario(membership, addresses):
    for address in addresses:
        membership.insert(address)
    assert membership.unique_count() == 4
    assert membership.search("192.168.0.1")
    assert not membership.search("8.8.8.1")


def test_empty(membership):
    assert membership.unique_count() == 0
    assert len(membership) == 0
    assert not membership.search("0.0.0.0")
    assert not membership.search("255.255.255.255")


def test_idempotence(membership):
    membership.insert("172.16.5.4")
    once = membership.unique_count()
    membership.insert("172.16.5.4")
    assert membership.unique_count() == once == 1
    assert membership.search("172.16.5.4")


def test_count_ignores_order_and_duplicates(membership):
    sequence = ["1.1.1.1", "2.2.2.2", "1.1.1.1", "3.3.3.3", "2.2.2.2", "1.1.1.1"]
    for address in reversed(sequence):
        membership.insert(address)
    assert membership.unique_count() == len(set(sequence))


@pytest.mark.parametrize(
    "missing", ["10.0.0.0", "10.0.0.3", "10.0.1.1", "138.0.0.1", "0.0.0.1"]
)
def test_negative_lookup_near_inserted(membership, missing):
    membership.insert("10.0.0.1")
    membership.insert("10.0.0.2")
    assert not membership.search(missing)


@pytest.mark.parametrize(
    "address", ["256.0.0.1", "1.2.3", "1.2.3.4.5", "a.b.c.d", "", "1.2.3.-4"]
)
def test_invalid_address(membership, address):
    membership.insert("1.2.3.4")
    with pytest.raises(InvalidAddressFormat):
        membership.insert(address)
    with pytest.raises(InvalidAddressFormat):
        membership.search(address)
    assert membership.unique_count() == 1
    assert membership.search("1.2.3.4")


def test_raw_keys_match_text(membership):
    membership.insert_key(0xC0A80001)
    assert membership.search("192.168.0.1")
    membership.insert("8.8.8.8")
    assert membership.search_key(0x08080808)
    assert membership.unique_count() == 2


def test_contains(membership):
    membership.insert("10.1.2.3")
    assert "10.1.2.3" in membership
    assert 0x0A010203 in membership
    assert "10.1.2.4" not in membership
    assert 0x0A010204 not in membership
    assert -1 not in membership
    assert 2 ** 32 not in membership
    assert 1.5 not in membership
    assert None not in membership
    assert "bogus" not in membership
    assert "256.1.2.3" not in membership
    assert "10.1.2.3.4" not in membership


def test_len(membership, addresses):
    membership.update(addresses)
    assert len(membership) == membership.unique_count() == 4


def test_update_is_all_or_nothing(membership):
    with pytest.raises(InvalidAddressFormat):
        membership.update(["1.1.1.1", "2.2.2.2", "bogus"])
    assert membership.unique_count() == 0
    assert not membership.search("1.1.1.1")


def test_update_accepts_iterators(membership):
    membership.update(iter(["1.1.1.1", "1.1.1.1", "1.1.1.2"]))
    assert membership.unique_count() == 2
