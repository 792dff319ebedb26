import io

from colorout.builder import OutputBuilder, OutputListBuilder
from colorout.color import Color, Color256
from colorout.output import Output, output

WHITE_256 = (
    "\x1b[48;5;231m\x1b[38;5;16777215m\x1b[1mtest_output_builder\x1b[22m\x1b[0m\n"
)


def test_output_builder_new_from():
    stream = io.StringIO()
    output(
        OutputBuilder()
        .text("test_output_builder")
        .color(Color256(0xFFFFFF))
        .bg_color(Color256(0xFFFFFF))
        .bold(True)
        .endl(True)
        .build(),
        stream,
    )
    output(
        OutputBuilder(Output())
        .text("test_output_builder")
        .color(Color256(0xFFFFFF))
        .bg_color(Color256(0xFFFFFF))
        .bold(True)
        .endl(True)
        .build(),
        stream,
    )
    assert stream.getvalue() == WHITE_256 * 2


def test_output_builder():
    stream = io.StringIO()
    OutputBuilder().text("test_output_builder_output").bg_color(
        Color256(0xFFFFFF)
    ).color(Color256(0xFFFFFF)).bold(True).endl(True).build().output(stream)
    assert stream.getvalue() == (
        "\x1b[48;5;231m\x1b[38;5;16777215m\x1b[1m"
        "test_output_builder_output\x1b[22m\x1b[0m\n"
    )


def test_builder_output_method():
    stream = io.StringIO()
    OutputBuilder().text("hi").color(Color.RED).output(stream)
    assert stream.getvalue() == "\x1b[31mhi\x1b[0m"


def test_builder_starts_from_given_output():
    built = OutputBuilder(Output(text="base", bold=True)).endl(True).build()
    assert built == Output(text="base", bold=True, endl=True)


def test_built_output_independent_of_later_changes():
    builder = OutputBuilder().text("first")
    first = builder.build()
    builder.text("second")
    assert first.text == "first"
    assert builder.build().text == "second"


def _list_builder_expected():
    return (
        "\x1b[44mtext\x1b[0m"
        "\x1b[48;5;59mtest_new_output_list_builder_1\x1b[0m"
        "\x1b[46mtest_new_output_list_builder_2\x1b[0m\n"
    )


def _fill(builder):
    return (
        builder.add(OutputBuilder().text("text").bg_color(Color.BLUE).endl(False).build())
        .add(
            Output(
                text="test_new_output_list_builder_1",
                color=Color.DEFAULT,
                bg_color=Color256(0x3F3F3F),
                endl=False,
            )
        )
        .add(
            Output(
                text="test_new_output_list_builder_2",
                color=Color.DEFAULT,
                bg_color=Color.CYAN,
                endl=True,
            )
        )
    )


def test_new_output_list_builder():
    stream = io.StringIO()
    builder = _fill(OutputListBuilder())
    builder.run(stream)
    assert stream.getvalue() == _list_builder_expected()
    assert len(builder) == 0


def test_new_from_output_list_builder():
    stream = io.StringIO()
    builder = _fill(OutputListBuilder([Output()]))
    assert len(builder) == 4
    builder.run(stream)
    assert stream.getvalue() == _list_builder_expected()
    assert len(builder) == 0


def test_remove_in_and_out_of_range():
    builder = OutputListBuilder([Output(text="a"), Output(text="b")])
    builder.remove(5)
    assert [o.text for o in builder.outputs] == ["a", "b"]
    builder.remove(-1)
    assert len(builder) == 2
    builder.remove(0)
    assert [o.text for o in builder.outputs] == ["b"]


def test_clear_empties_list():
    builder = OutputListBuilder([Output(text="a")])
    builder.clear()
    assert builder.outputs == []


def test_query_idx():
    builder = OutputListBuilder([Output(text="a"), Output(text="b")])
    assert builder.query_idx(1) == Output(text="b")
    assert builder.query_idx(2) == Output()


def test_run_idx_writes_without_removing():
    stream = io.StringIO()
    builder = OutputListBuilder([Output(text="a"), Output(text="b", endl=True)])
    builder.run_idx(1, stream)
    assert stream.getvalue() == "b\x1b[0m\n"
    assert len(builder) == 2


def test_run_idx_out_of_range_writes_nothing():
    stream = io.StringIO()
    builder = OutputListBuilder([Output(text="a")])
    builder.run_idx(3, stream)
    assert stream.getvalue() == ""
    assert len(builder) == 1