from pathlib import Path
from typing import Any, Callable, Tuple

import pytest


CARDS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<cards>
  <card>
    <name>Serra Angel</name>
    <cost>3WW</cost>
    <typelist>
      <type type="card">Creature</type>
      <type>Angel</type>
    </typelist>
    <pow>4</pow>
    <tgh>4</tgh>
    <rulelist>
      <rule no="1" reminder="This creature can't be blocked except by creatures with flying or reach.">Flying</rule>
      <rule no="2" reminder="Attacking doesn't cause this creature to tap.">Vigilance</rule>
    </rulelist>
  </card>
  <card>
    <name>Æther Adept</name>
    <cost>1UU</cost>
    <typelist>
      <type type="card">Creature</type>
      <type>Human</type>
      <type>Wizard</type>
    </typelist>
    <pow>2</pow>
    <tgh>2</tgh>
    <rulelist>
      <rule>When Æther Adept enters the battlefield, return target creature to its owner’s hand.</rule>
    </rulelist>
  </card>
  <card>
    <name>Fire</name>
    <cost>1R</cost>
    <typelist>
      <type type="card">Instant</type>
    </typelist>
    <rulelist>
      <rule>Fire deals 2 damage divided as you choose among one or two targets.</rule>
    </rulelist>
    <multi>
      <name>Ice</name>
      <cost>1U</cost>
      <typelist>
        <type type="card">Instant</type>
      </typelist>
      <rulelist>
        <rule>Tap target permanent.</rule>
        <rule>Draw a card.</rule>
      </rulelist>
    </multi>
  </card>
  <card>
    <name>Black Lotus</name>
    <cost>0</cost>
    <typelist>
      <type type="card">Artifact</type>
    </typelist>
  </card>
</cards>
"""

SETINFO_XML = """<?xml version="1.0" encoding="UTF-8"?>
<setinfo>
  <set>
    <code>M11</code>
    <name>Magic 2011</name>
    <release-date>2010-07-16</release-date>
  </set>
  <set>
    <code>M10</code>
    <name>Magic 2010</name>
    <release-date>2009-07-17</release-date>
  </set>
  <set>
    <code>LEA</code>
    <name>Limited Edition Alpha</name>
    <release-date>1993-08-05</release-date>
  </set>
  <set>
    <code>ZEN</code>
    <name>Zendikar</name>
    <release-date>2009-10-02</release-date>
  </set>
</setinfo>
"""

META_XML = """<?xml version="1.0" encoding="UTF-8"?>
<meta>
  <card name="Serra Angel">
    <instance><set>Magic 2011</set><rarity>uncommon</rarity></instance>
    <instance><set>Magic 2010</set><rarity>uncommon</rarity></instance>
    <instance><set>Limited Edition Alpha</set><rarity>uncommon</rarity></instance>
  </card>
  <card name="Æther Adept">
    <instance><set>Magic 2011</set><rarity>common</rarity></instance>
  </card>
  <card name="Fire">
    <instance><set>Zendikar</set><rarity>uncommon</rarity></instance>
  </card>
  <card name="Black Lotus">
    <instance><set>Limited Edition Alpha</set><rarity>rare</rarity></instance>
    <instance><set>Limited Edition Alpha</set><rarity>rare</rarity></instance>
  </card>
</meta>
"""


def _write_dataset(
    directory: Path,
    cards: str = CARDS_XML,
    setinfo: str = SETINFO_XML,
    meta: str = META_XML,
    names: Tuple[str, str, str] = ("cards", "setinfo", "meta"),
) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for name, content in zip(names, (cards, setinfo, meta)):
        (directory / f"{name}.xml").write_text(content, encoding="utf-8")
    return directory


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[..., Path]:
    """Write a dataset below tmp_path; any document can be swapped out."""

    def _write(subdir: str = "dataset", **documents: Any) -> Path:
        return _write_dataset(tmp_path / subdir, **documents)

    return _write


@pytest.fixture
def meta_xml() -> str:
    return META_XML


@pytest.fixture
def dataset_dir(write_dataset) -> Path:
    return write_dataset()
