import pytest

from inflectkit.adjective import comparative, superlative

COMPARATIVE_CASES = [
    ("", ""),
    ("good", "better"), ("well", "better"), ("bad", "worse"), ("ill", "worse"),
    ("far", "farther"), ("little", "less"), ("much", "more"), ("many", "more"),
    ("old", "older"),
    ("tall", "taller"), ("short", "shorter"), ("fast", "faster"), ("slow", "slower"),
    ("young", "younger"), ("long", "longer"), ("strong", "stronger"), ("weak", "weaker"),
    ("cheap", "cheaper"), ("deep", "deeper"), ("high", "higher"), ("low", "lower"),
    ("new", "newer"), ("poor", "poorer"), ("rich", "richer"), ("warm", "warmer"),
    ("cold", "colder"), ("dark", "darker"), ("light", "lighter"), ("hard", "harder"),
    ("soft", "softer"), ("clean", "cleaner"), ("loud", "louder"),
    ("large", "larger"), ("wide", "wider"), ("close", "closer"), ("late", "later"),
    ("nice", "nicer"), ("safe", "safer"), ("wise", "wiser"), ("rude", "ruder"),
    ("rare", "rarer"), ("pale", "paler"), ("fine", "finer"), ("cute", "cuter"),
    ("pure", "purer"),
    ("big", "bigger"), ("hot", "hotter"), ("thin", "thinner"), ("fat", "fatter"),
    ("wet", "wetter"), ("sad", "sadder"), ("red", "redder"), ("dim", "dimmer"),
    ("fit", "fitter"),
    ("happy", "happier"), ("easy", "easier"), ("busy", "busier"), ("funny", "funnier"),
    ("pretty", "prettier"), ("heavy", "heavier"), ("dirty", "dirtier"),
    ("angry", "angrier"), ("crazy", "crazier"), ("lazy", "lazier"), ("tiny", "tinier"),
    ("ugly", "uglier"), ("early", "earlier"), ("noisy", "noisier"),
    ("simple", "simpler"), ("gentle", "gentler"), ("narrow", "narrower"),
    ("shallow", "shallower"), ("quiet", "quieter"), ("clever", "cleverer"),
    ("beautiful", "more beautiful"), ("dangerous", "more dangerous"),
    ("expensive", "more expensive"), ("important", "more important"),
    ("interesting", "more interesting"), ("comfortable", "more comfortable"),
    ("difficult", "more difficult"), ("intelligent", "more intelligent"),
    ("wonderful", "more wonderful"), ("terrible", "more terrible"),
    ("horrible", "more horrible"), ("incredible", "more incredible"),
    ("successful", "more successful"), ("popular", "more popular"),
    ("famous", "more famous"), ("nervous", "more nervous"),
    ("BIG", "BIGGER"), ("Big", "Bigger"), ("GOOD", "BETTER"), ("Good", "Better"),
    ("BEAUTIFUL", "MORE BEAUTIFUL"), ("Beautiful", "More Beautiful"),
    ("shy", "shyer"), ("sly", "slyer"), ("spry", "spryer"), ("wry", "wryer"),
    ("real", "more real"), ("right", "more right"), ("wrong", "more wrong"),
    ("just", "more just"), ("fun", "more fun"), ("apt", "more apt"),
    ("own", "more own"), ("main", "more main"), ("chief", "more chief"),
    ("like", "more like"), ("prime", "more prime"), ("fake", "more fake"),
    ("key", "more key"), ("due", "more due"), ("worth", "more worth"),
    ("loath", "more loath"), ("void", "more void"), ("null", "more null"),
    ("male", "more male"), ("awry", "more awry"),
    ("past", "more past"), ("next", "more next"), ("last", "more last"),
    ("first", "more first"),
]

SUPERLATIVE_CASES = [
    ("", ""),
    ("good", "best"), ("well", "best"), ("bad", "worst"), ("ill", "worst"),
    ("far", "farthest"), ("little", "least"), ("much", "most"), ("many", "most"),
    ("old", "oldest"),
    ("tall", "tallest"), ("short", "shortest"), ("fast", "fastest"), ("slow", "slowest"),
    ("young", "youngest"), ("long", "longest"), ("strong", "strongest"),
    ("weak", "weakest"), ("cheap", "cheapest"), ("deep", "deepest"),
    ("high", "highest"), ("low", "lowest"), ("new", "newest"), ("poor", "poorest"),
    ("rich", "richest"), ("warm", "warmest"), ("cold", "coldest"), ("dark", "darkest"),
    ("light", "lightest"), ("hard", "hardest"), ("soft", "softest"),
    ("clean", "cleanest"), ("loud", "loudest"),
    ("large", "largest"), ("wide", "widest"), ("close", "closest"), ("late", "latest"),
    ("nice", "nicest"), ("safe", "safest"), ("wise", "wisest"), ("rude", "rudest"),
    ("rare", "rarest"), ("pale", "palest"), ("fine", "finest"), ("cute", "cutest"),
    ("pure", "purest"),
    ("big", "biggest"), ("hot", "hottest"), ("thin", "thinnest"), ("fat", "fattest"),
    ("wet", "wettest"), ("sad", "saddest"), ("red", "reddest"), ("dim", "dimmest"),
    ("fit", "fittest"),
    ("happy", "happiest"), ("easy", "easiest"), ("busy", "busiest"),
    ("funny", "funniest"), ("pretty", "prettiest"), ("heavy", "heaviest"),
    ("dirty", "dirtiest"), ("angry", "angriest"), ("crazy", "craziest"),
    ("lazy", "laziest"), ("tiny", "tiniest"), ("ugly", "ugliest"),
    ("early", "earliest"), ("noisy", "noisiest"),
    ("simple", "simplest"), ("gentle", "gentlest"), ("narrow", "narrowest"),
    ("shallow", "shallowest"), ("quiet", "quietest"), ("clever", "cleverest"),
    ("beautiful", "most beautiful"), ("dangerous", "most dangerous"),
    ("expensive", "most expensive"), ("important", "most important"),
    ("interesting", "most interesting"), ("comfortable", "most comfortable"),
    ("difficult", "most difficult"), ("intelligent", "most intelligent"),
    ("wonderful", "most wonderful"), ("terrible", "most terrible"),
    ("horrible", "most horrible"), ("incredible", "most incredible"),
    ("successful", "most successful"), ("popular", "most popular"),
    ("famous", "most famous"), ("nervous", "most nervous"),
    ("BIG", "BIGGEST"), ("Big", "Biggest"), ("GOOD", "BEST"), ("Good", "Best"),
    ("BEAUTIFUL", "MOST BEAUTIFUL"), ("Beautiful", "Most Beautiful"),
    ("shy", "shyest"), ("sly", "slyest"), ("spry", "spryest"), ("wry", "wryest"),
    ("real", "most real"), ("right", "most right"), ("wrong", "most wrong"),
    ("just", "most just"), ("fun", "most fun"), ("apt", "most apt"),
    ("own", "most own"), ("main", "most main"), ("chief", "most chief"),
    ("like", "most like"), ("prime", "most prime"), ("fake", "most fake"),
    ("key", "most key"), ("due", "most due"), ("worth", "most worth"),
    ("loath", "most loath"), ("void", "most void"), ("null", "most null"),
    ("male", "most male"), ("awry", "most awry"),
    ("past", "most past"), ("next", "most next"), ("last", "most last"),
    ("first", "most first"),
]


@pytest.mark.parametrize(("word", "expected"), COMPARATIVE_CASES)
def test_comparative(word, expected):
    assert comparative(word) == expected


@pytest.mark.parametrize(("word", "expected"), SUPERLATIVE_CASES)
def test_superlative(word, expected):
    assert superlative(word) == expected