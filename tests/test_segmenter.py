from __future__ import annotations

from hindi_transliterator.mappings import DENTAL_THA
from hindi_transliterator.segmenter import Segmenter


def test_render_basic_words() -> None:
    seg = Segmenter()
    assert seg.render("priya") == "प्रिया"
    assert seg.render("rajesh") == "राजेश"
    assert seg.render("sharma") == "शर्मा"
    assert seg.render("main") == "मैन"
    assert seg.render("amit") == "अमित"


def test_render_is_case_insensitive() -> None:
    seg = Segmenter()
    assert seg.render("Sharma") == seg.render("sharma")


def test_dictionary_is_not_consulted() -> None:
    assert Segmenter().render("kumar") == "कुमर"


def test_virama_between_consonants() -> None:
    assert Segmenter().render("arjun") == "अर्जुन"


def test_no_virama_before_final_consonant() -> None:
    assert Segmenter().render("mg") == "मग"


def test_vowel_rule_is_recorded() -> None:
    segs = Segmenter().segment("manish")
    a = [s for s in segs if s.latin == "a"]
    assert a and a[0].glyph == "" and a[0].rule == "short_a_exception"
    assert Segmenter().render("manish") == "मनिश"


def test_final_consonant_records_schwa_decision() -> None:
    seg = Segmenter()
    assert seg.segment("kumar")[-1].inherent_vowel is False
    assert seg.segment("rajesh")[-1].inherent_vowel is True
    assert seg.segment("kumar")[0].inherent_vowel is None


def test_overrides_apply_to_consonant_keys() -> None:
    seg = Segmenter()
    assert seg.render("mathur") == "मठुर"
    assert seg.render("mathur", overrides={"th": DENTAL_THA}) == "मथुर"


def test_unknown_characters_pass_through() -> None:
    segs = Segmenter().segment("a1")
    assert segs[-1].kind == "passthrough" and segs[-1].glyph == "1"


def test_nasalization_is_opt_in() -> None:
    assert Segmenter().render("sandeep") == "सन्दीप"
    assert Segmenter(nasalize=True).render("sandeep") == "संदीप"
    assert Segmenter(nasalize=True).render("ankit") == "अंकित"


def test_no_anusvara_before_doubled_nasal() -> None:
    assert "ं" not in Segmenter(nasalize=True).render("anna")


def test_short_words_keep_short_a() -> None:
    seg = Segmenter()
    assert seg.render("ma") == "म"
    assert seg.render("uma") == "उम"
    assert seg.render("kya") == "क्य"
    assert seg.render("pra") == "प्र"
    assert seg.render("raj") == "राज"


def test_ia_after_consonant() -> None:
    assert Segmenter().render("sonia") == "सोनिया"
