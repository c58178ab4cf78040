from dsakit.trie import Trie


def test_inserted_word_is_found():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple") is True


def test_prefix_is_not_a_word():
    trie = Trie(["apple"])
    assert trie.search("app") is False
    assert trie.starts_with("app") is True


def test_prefix_becomes_word_after_insert():
    trie = Trie(["apple"])
    trie.insert("app")
    assert trie.search("app") is True
    assert trie.search("apple") is True


def test_missing_word_and_prefix():
    trie = Trie(["apple", "banana"])
    assert trie.search("cherry") is False
    assert trie.starts_with("ch") is False
    assert trie.search("apples") is False


def test_every_prefix_of_inserted_word():
    word = "keyboard"
    trie = Trie([word])
    assert all(trie.starts_with(word[:i]) for i in range(len(word) + 1))
    assert [trie.search(word[:i]) for i in range(len(word) + 1)].count(True) == 1


def test_contains_operator():
    trie = Trie(["cat", "car"])
    assert "cat" in trie
    assert "ca" not in trie
    assert 5 not in trie


def test_empty_trie():
    trie = Trie()
    assert trie.search("a") is False
    assert trie.starts_with("a") is False
    assert trie.starts_with("") is True