# inflectkit

Small, dependency-free helpers for English word forms and identifier casing.

## Installation

```
pip install inflectkit
```

## Adjectives and adverbs

```python
from inflectkit.adjective import comparative, superlative
from inflectkit.adverb import adverb

comparative("big")        # "bigger"
comparative("happy")      # "happier"
comparative("beautiful")  # "more beautiful"
superlative("good")       # "best"

adverb("quick")   # "quickly"
adverb("gentle")  # "gently"
adverb("basic")   # "basically"
adverb("good")    # "well"
adverb("fast")    # "fast"
```

`comparative` and `superlative` use -er/-est for one-syllable words, for
two-syllable words ending in -y and for a short list of other two-syllable
words (simple, narrow, quiet, ...). Other words get "more"/"most". Some short
words that sound wrong with a suffix also get "more"/"most" (real, fun, key,
last, ...). Irregular forms such as good/better/best and bad/worse/worst are
built in.

Case is kept: `comparative("BIG")` gives `"BIGGER"` and
`comparative("Beautiful")` gives `"More Beautiful"`. An empty string gives an
empty string.

## Indefinite articles

```python
from inflectkit.article import an, a, def_a, def_an_pattern, def_a_reset

an("apple")            # "an apple"
an("hour")             # "an hour"
an("university")       # "a university"
a("YAML code block")   # "a YAML code block"

def_a("ape")
an("ape")              # "a ape"
def_an_pattern("hero.*")
an("heroic")           # "an heroic"
def_a_reset()          # drop all custom rules
```

The choice is made from the first word of the input. The built-in rules handle
silent "h" (honest, hour, heir), vowels spoken as consonants (unanimous,
Ukrainian, euro, one) and abbreviations read letter by letter (an FBI agent,
a YAML file).

The module-level functions (`an`, `a`, `def_a`, `def_an`, `undef_a`,
`undef_an`, `def_a_pattern`, `def_an_pattern`, `undef_a_pattern`,
`undef_an_pattern`, `def_a_reset`) share one default `ArticleEngine`. For rules
kept apart from that default, create your own:

```python
from inflectkit.article import ArticleEngine

engine = ArticleEngine()
engine.def_an("cat")
engine.an("cat")       # "an cat"
engine.undef_an("cat") # True
```

Custom rules are checked in this order: exact words forced to "a", exact words
forced to "an", "a" patterns, "an" patterns, then the built-in rules. Words are
matched case-insensitively. Patterns must match the whole lowercased first
word; an invalid pattern raises `re.error`. `undef_a_pattern` and
`undef_an_pattern` remove a pattern given with exactly the text it was defined
with and return whether one was removed. An engine is safe to use from several
threads.

## Identifier case conversion

```python
from inflectkit.case import underscore, dasherize, pascal_case, camel_case

underscore("getHTTPResponse")  # "get_http_response"
dasherize("HelloWorld")        # "hello-world"
dasherize("HTTP2Server")       # "http-2-server"
pascal_case("hello_world")     # "HelloWorld"
camel_case("HTTP_SERVER")      # "httpServer"
```

Underscores, hyphens and whitespace all count as separators; runs of capitals
such as "HTTP" stay together as one word, and digits form words of their own.
`snake_case`, `kebab_case` and `title_case` are aliases of `underscore`,
`dasherize` and `pascal_case`.

## Syllables and case helpers

`inflectkit.letters` provides the building blocks used by the modules above:

- `count_syllables(word)`: an estimate from vowel groups (a, e, i, o, u, y),
  not counting a final silent "e"; at least 1 for a non-empty word, 0 for "".
- `is_vowel(char)`: True for a single vowel letter, y included, in any case.
- `is_all_upper(word)`: True if the word has letters and none is lowercase.
- `match_case(original, replacement)`: gives `replacement` the capitalisation
  of `original` (all upper, or first letter upper).
- `match_suffix(original, suffix)`: uppercases `suffix` when `original` is all
  uppercase.

```python
from inflectkit.letters import count_syllables, match_case

count_syllables("beautiful")  # 3
match_case("Good", "better")  # "Better"
```

## What it does not do

inflectkit does not pluralise or singularise nouns, conjugate verbs, spell out
numbers or ordinals, or compare singular and plural forms. It has no
command-line tool; it is used as a library only.

## Running the tests

```
pip install -e ".[test]"
pytest
```