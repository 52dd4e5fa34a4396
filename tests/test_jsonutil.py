import io
from dataclasses import dataclass

import pytest

from utilkit import jsonutil


@dataclass
class User:
    name: str
    age: int


TEST_USER = User("inhere", 200)


@dataclass
class _Sample:
    a: int


@pytest.mark.parametrize("sample", [{"a": 1}, _Sample(1)])
def test_pretty(sample):
    assert jsonutil.pretty(sample) == '{\n    "a": 1\n}'


def test_encode():
    assert jsonutil.encode(TEST_USER) == b'{"name":"inhere","age":200}'
    assert jsonutil.encode({"name": "inhere", "age": 200}) == b'{"name":"inhere","age":200}'


def test_encode_escapes_html():
    assert jsonutil.encode({"a": "<b>&"}) == b'{"a":"\\u003cb\\u003e\\u0026"}'


def test_encode_unescape_html():
    assert jsonutil.encode_unescape_html({"a": "<b>"}) == b'{"a":"<b>"}\n'
    assert jsonutil.encode_unescape_html(TEST_USER) == b'{"name":"inhere","age":200}\n'


def test_encode_rejects_unserializable():
    with pytest.raises(TypeError):
        jsonutil.encode({"a": object()})


def test_encode_to_writer_text():
    buf = io.StringIO()
    jsonutil.encode_to_writer(TEST_USER, buf)
    assert buf.getvalue() == '{"name":"inhere","age":200}\n'


def test_encode_to_writer_bytes():
    buf = io.BytesIO()
    jsonutil.encode_to_writer(TEST_USER, buf)
    assert buf.getvalue() == b'{"name":"inhere","age":200}\n'


def test_decode():
    data = jsonutil.decode(b'{"name":"inhere","age":200}')
    assert data == {"name": "inhere", "age": 200}


def test_decode_string():
    data = jsonutil.decode_string('{"name":"inhere","age":200}')
    assert data["name"] == "inhere"
    assert data["age"] == 200


def test_decode_invalid():
    with pytest.raises(ValueError):
        jsonutil.decode_string("{bad")


def test_decode_reader():
    assert jsonutil.decode_reader(io.StringIO('[1, 2]')) == [1, 2]


def test_write_read_file(tmp_path):
    path = tmp_path / "test.json"
    jsonutil.write_file(path, TEST_USER)
    data = jsonutil.read_file(path)
    assert data == {"name": "inhere", "age": 200}


GIVENS_AND_WANTS = [
    ('{\n"name":"app" // comments\n}', '{"name":"app"}'),
    ('{\n// comments\n"name":"app" \n}', '{"name":"app"}'),
    ('{"name":"app"} // comments\n', '{"name":"app"}'),
    ('{"name":"app"} /* comments */\n', '{"name":"app"}'),
    ('/* comments */\n{"name":"app"}', '{"name":"app"}'),
    ('/* \ncomments \n*/\n{"name":"app"}', '{"name":"app"}'),
    ('/** \ncomments \n*/\n{"name":"app"}', '{"name":"app"}'),
    ('/** \ncomments \n**/\n{"name":"app"}', '{"name":"app"}'),
    ('/** \n* comments \n**/\n{"name":"app"}', '{"name":"app"}'),
    ('/** \n/* comments \n**/\n{"name":"app"}', '{"name":"app"}'),
    ('/** \n/* comments *\n**/\n{"name":"app"}', '{"name":"app"}'),
    ('{"name": /*comments*/"app"}', '{"name": "app"}'),
    ('{/*comments*/"name": "app"}', '{"name": "app"}'),
    ('{"name":"app"}', '{"name":"app"}'),
    ('{"name":"app"} // comments', '{"name":"app"}'),
    ('{"name":"http://abc.com"} // comments', '{"name":"http://abc.com"}'),
    (
        '{\n"address": [\n\t"http://192.168.1.XXX:2379"\n]\n} // comments',
        '{"address":["http://192.168.1.XXX:2379"]}',
    ),
]


@pytest.mark.parametrize("given, want", GIVENS_AND_WANTS)
def test_strip_comments(given, want):
    assert jsonutil.strip_comments(given) == want


def test_strip_comments_full_document():
    src = """
{// comments
    "name": "app", // comments
/*comments*/
    "debug": false,
    "baseKey": "value", // comments
	/* comments */
    "age": 123,
    "envKey1": "${NotExist|defValue}",
    "map1": { // comments
        "key": "val",
        "key1": "val1",
        "key2": "val2"
    },
    "arr1": [ // comments
        "val",
        "val1", // comments
		/* comments */
        "val2",
		"http://a.com"
    ],
	/* 
		comments 
*/
    "lang": {
		/** 
 		 * comments 
 		 */
        "dir": "res/lang",
        "allowed": {
            "en": "val",
            "zh-CN": "val2"
        }
    }
}"""
    want = (
        '{"name":"app","debug":false,"baseKey":"value","age":123,'
        '"envKey1":"${NotExist|defValue}","map1":{"key":"val","key1":"val1","key2":"val2"},'
        '"arr1":["val","val1","val2","http://a.com"],'
        '"lang":{"dir":"res/lang","allowed":{"en":"val","zh-CN":"val2"}}}'
    )
    assert jsonutil.strip_comments(src) == want


def test_strip_comments_keeps_escaped_quotes():
    src = '{"a": "say \\"hi // there\\""} // tail'
    assert jsonutil.strip_comments(src) == '{"a":"say \\"hi // there\\""}'