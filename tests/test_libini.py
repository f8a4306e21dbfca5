import pytest

from simplemenu.libini import IniFormatError, IniReader


def test_sections_in_order_then_none():
    reader = IniReader("[alpha]\nx=1\n[beta]\ny=2\n")
    assert reader.next_section() == "alpha"
    assert reader.next_section() == "beta"
    assert reader.next_section() is None


def test_pairs_until_next_section():
    reader = IniReader("[alpha]\nx=1\ny=2\n[beta]\nz=3\n")
    reader.next_section()
    assert reader.read_pair() == ("x", "1")
    assert reader.read_pair() == ("y", "2")
    assert reader.read_pair() is None
    assert reader.next_section() == "beta"
    assert reader.read_pair() == ("z", "3")
    assert reader.read_pair() is None


def test_leading_comments_skipped():
    reader = IniReader("# comment\n\n[main]\n# inner\nk=v\n")
    assert reader.next_section() == "main"
    assert reader.read_pair() == ("k", "v")


def test_data_must_start_with_section():
    with pytest.raises(IniFormatError):
        IniReader("k=v\n").next_section()


def test_leading_space_before_section_is_error():
    with pytest.raises(IniFormatError):
        IniReader(" [main]\n").next_section()


def test_unterminated_section_is_error():
    with pytest.raises(IniFormatError):
        IniReader("[main\nk=v\n").next_section()


def test_key_and_value_trimming():
    reader = IniReader("[s]\nname \t=  value\r\n")
    reader.next_section()
    assert reader.read_pair() == ("name", "value")


def test_empty_value():
    reader = IniReader("[s]\nk=\n")
    reader.next_section()
    assert reader.read_pair() == ("k", "")


def test_line_without_equals_is_error():
    reader = IniReader("[s]\nbroken\n")
    reader.next_section()
    with pytest.raises(IniFormatError):
        reader.read_pair()


def test_last_value_needs_newline():
    reader = IniReader("[s]\nk=v")
    reader.next_section()
    with pytest.raises(IniFormatError):
        reader.read_pair()


def test_skipping_unread_pairs_finds_next_section():
    reader = IniReader("[a]\nx=1\n[b]\ny=2\n")
    reader.next_section()
    assert reader.next_section() == "b"


def test_bytes_input():
    reader = IniReader(b"[bytes]\nk=v\n")
    assert reader.next_section() == "bytes"
    assert reader.read_pair() == ("k", "v")


def test_set_read_pointer_clamps():
    text = "[s]\nk=v\n"
    reader = IniReader(text)
    reader.set_read_pointer(-5)
    assert reader.position == 0
    reader.set_read_pointer(1000)
    assert reader.position == len(text)


def test_set_read_pointer_rereads_section():
    reader = IniReader("[s]\nk=v\n")
    reader.next_section()
    reader.read_pair()
    reader.set_read_pointer(0)
    assert reader.next_section() == "s"


def test_line_numbers():
    text = "[s]\nk=v\nj=w\n"
    reader = IniReader(text)
    assert reader.line_number(0) == 1
    newline = text.index("\n")
    assert reader.line_number(newline + 1) - reader.line_number(newline) == 1


@pytest.mark.parametrize("offset", [-1, 100])
def test_line_number_out_of_range(offset):
    with pytest.raises(ValueError):
        IniReader("[s]\n").line_number(offset)


def test_from_file(tmp_path):
    path = tmp_path / "a.ini"
    path.write_text("[file]\nk=v\n")
    reader = IniReader.from_file(path)
    assert reader.next_section() == "file"


def test_from_empty_file(tmp_path):
    path = tmp_path / "empty.ini"
    path.write_text("")
    with pytest.raises(IniFormatError):
        IniReader.from_file(path)


def test_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        IniReader.from_file(tmp_path / "missing.ini")