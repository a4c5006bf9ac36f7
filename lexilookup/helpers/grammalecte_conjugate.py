"""Print the conjugation table of a French verb with Grammalecte.

Output is an outline: a title line, one "**" heading per tense and one
"- " item per conjugated form.
"""

import sys

from grammalecte.fr import conj

PERSONS = [":1s", ":2s", ":3s", ":1p", ":2p", ":3p"]
IMPERATIVE_PERSONS = [":2s", ":1p", ":2p"]

TENSES = [
    ("Indicatif présent", ":Ip"),
    ("Indicatif imparfait", ":Iq"),
    ("Indicatif passé simple", ":Is"),
    ("Indicatif futur", ":If"),
    ("Conditionnel présent", ":K"),
    ("Subjonctif présent", ":Sp"),
    ("Subjonctif imparfait", ":Sq"),
]


def main():
    if len(sys.argv) != 2:
        print("usage: grammalecte_conjugate.py VERB", file=sys.stderr)
        return 2

    verb = sys.argv[1].strip().lower()
    if not conj.isVerb(verb):
        print(f"« {verb} » n'est pas un verbe connu", file=sys.stderr)
        return 3

    v = conj.Verb(verb)
    print(f"* Conjugaison de {verb}")
    print("** Participes")
    print(f"- {v.participePresent(False, False, False, False, False)}")
    for form in (":m:s", ":m:p", ":f:s", ":f:p"):
        participle = v.participePasse(form)
        if participle:
            print(f"- {participle}")

    for label, tense in TENSES:
        print(f"** {label}")
        for who in PERSONS:
            form = v.conjugue(tense, who, False, False, False, False, False)
            if form:
                print(f"- {form}")

    print("** Impératif présent")
    for who in IMPERATIVE_PERSONS:
        form = v.imperatif(who, False, False, False, False)
        if form:
            print(f"- {form}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
