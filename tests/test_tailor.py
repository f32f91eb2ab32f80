import pytest

from tailorcss import LazySession, Options, generate_css, generate_path_css


@pytest.fixture
def html_tree(tmp_path):
    """A small site: nested .html files plus files that must be ignored"""
    root = tmp_path / 'site'
    (root / 'sub' / 'deeper').mkdir(parents=True)
    (root / 'a.html').write_text('<div class="container p40"></div>', encoding='utf-8')
    (root / 'notes.txt').write_text('<div class="w999"></div>', encoding='utf-8')
    (root / 'sub' / 'b.HTML').write_text('<p class="mb30"></p>', encoding='utf-8')
    (root / 'sub' / 'deeper' / 'c.html').write_text('<i class="w1200"></i>', encoding='utf-8')
    (root / 'sub' / 'deeper' / 'style.css').write_text('.x{}', encoding='utf-8')
    return root


@pytest.fixture
def demo_file(tmp_path):
    path = tmp_path / 'demo-1.html'
    path.write_text('<div class="w1200"></div>', encoding='utf-8')
    return path


def test_generate_from_html_string():
    css = generate_css('<div class="container pt30"></div>')

    assert css.minified == '.pt30{padding-top:30px;}'
    assert css.object == {
        '.pt30': {'properties': [{'property': 'padding-top', 'value': '30px'}]}
    }


def test_set_important_from_options_dict():
    css = generate_css('<div class="container pt30"></div>', {'setImportant': True})

    assert css.minified == '.pt30{padding-top:30px !important;}'


def test_no_class_attribute_returns_empty_result():
    css = generate_css('<div id="main"><p>hello</p></div>')

    assert css.to_dict() == {'minified': '', 'formatted': '', 'object': {}}


def test_repeated_class_value_compiles_once():
    once = generate_css('<div class="pt30 mb10"></div>')
    twice = generate_css('<div class="pt30 mb10"></div><span class="pt30 mb10"></span>')

    assert twice == once


def test_single_html_file(demo_file):
    css = generate_path_css(str(demo_file))

    assert css.minified == '.w1200{width:1200px;}'


def test_path_objects_are_accepted(demo_file):
    assert generate_path_css(demo_file).minified == '.w1200{width:1200px;}'


def test_non_html_files_are_ignored(tmp_path):
    (tmp_path / 'index.html').write_text('<div class="w1200"></div>', encoding='utf-8')
    (tmp_path / 'readme.md').write_text('<div class="pt30"></div>', encoding='utf-8')

    css = generate_path_css(str(tmp_path))

    assert css.minified == '.w1200{width:1200px;}'


def test_directories_are_read_at_any_depth(html_tree):
    css = generate_path_css(str(html_tree))

    assert css.minified == '.p40{padding:40px;}.mb30{margin-bottom:30px;}.w1200{width:1200px;}'


def test_list_of_paths(html_tree, demo_file):
    css = generate_path_css([str(html_tree / 'sub'), str(demo_file)])

    # demo-1.html repeats the exact value already found in c.html
    assert css.minified == '.mb30{margin-bottom:30px;}.w1200{width:1200px;}'


def test_missing_path_is_reported_and_skipped(tmp_path, demo_file, capsys):
    css = generate_path_css([str(tmp_path / 'nope'), str(demo_file)])

    assert css.minified == '.w1200{width:1200px;}'
    assert 'does not exist' in capsys.readouterr().out


@pytest.mark.parametrize('paths', ['', [], None])
def test_path_is_required(paths):
    with pytest.raises(ValueError, match='path is required'):
        generate_path_css(paths)


def test_location_must_be_a_string():
    with pytest.raises(TypeError, match='Location must be string, int given'):
        generate_path_css([123])


def test_single_non_string_path_reports_its_type():
    with pytest.raises(TypeError, match='Location must be string, int given'):
        generate_path_css(5)


def test_empty_location_does_not_scan_the_working_directory(tmp_path, monkeypatch):
    (tmp_path / 'unrelated.html').write_text('<div class="w777"></div>', encoding='utf-8')
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ValueError, match='path is required'):
        generate_path_css([''])


def test_minified_output_file(html_tree, tmp_path):
    output = tmp_path / 'out' / 'css' / 'tailored.css'

    css = generate_path_css(str(html_tree), {'outputPath': str(output), 'minifyOutput': True})

    assert output.is_file()
    assert output.read_bytes() == css.minified.encode('utf-8')


def test_formatted_output_file(html_tree, tmp_path):
    output = tmp_path / 'tailored.css'

    css = generate_path_css(str(html_tree), Options(output_path=str(output)))

    assert output.read_text(encoding='utf-8') == css.formatted
    assert css.formatted.startswith('.p40 {\n    padding: 40px;\n}\n\n')


def test_custom_newlines_are_written_untouched(tmp_path):
    output = tmp_path / 'tailored.css'

    generate_css('<div class="p4"></div>', Options(output_path=str(output), new_line_char='\r\n'))

    assert output.read_bytes() == b'.p4 {\r\n    padding: 4px;\r\n}\r\n\r\n'


def test_output_path_needs_css_filename(tmp_path):
    output_dir = tmp_path / 'assets'

    with pytest.raises(ValueError, match='css filename'):
        generate_css('<div class="p4"></div>', {'outputPath': str(output_dir)})

    assert not output_dir.exists()


def test_nothing_written_without_class_attributes(tmp_path):
    output = tmp_path / 'tailored.css'

    generate_css('<div></div>', Options(output_path=str(output)))

    assert not output.exists()


def test_lazy_generation(demo_file):
    session = LazySession()
    session.push_html('<div class="container pt30"></div>')
    session.push_html('<div class="container mb40"></div>')
    session.push_path(str(demo_file))

    css = session.generate()

    # Markup read from pushed paths comes first
    assert css.minified == (
        '.w1200{width:1200px;}.pt30{padding-top:30px;}.mb40{margin-bottom:40px;}'
    )
    assert list(css.object) == ['.w1200', '.pt30', '.mb40']


def test_lazy_session_is_reset_after_generation():
    session = LazySession()
    session.push_html('<div class="pt30"></div>')
    session.generate()

    assert session.is_empty()
    with pytest.raises(ValueError, match='No HTML or path given'):
        session.generate()


def test_empty_lazy_session_raises():
    with pytest.raises(ValueError):
        LazySession().generate()


def test_lazy_session_with_only_empty_markup_raises():
    session = LazySession()
    session.push_html('')

    assert session.is_empty()
    with pytest.raises(ValueError, match='No HTML or path given'):
        session.generate()


def test_lazy_sessions_are_independent():
    first = LazySession()
    second = LazySession()
    first.push_html('<div class="pt30"></div>')
    second.push_html('<div class="mb10"></div>')

    assert first.generate().minified == '.pt30{padding-top:30px;}'
    assert second.generate().minified == '.mb10{margin-bottom:10px;}'


def test_lazy_generation_writes_output(tmp_path):
    output = tmp_path / 'lazy.css'
    session = LazySession()
    session.push_html('<div class="w10"></div>')

    session.generate({'outputPath': str(output), 'minifyOutput': True})

    assert output.read_text(encoding='utf-8') == '.w10{width:10px;}'
