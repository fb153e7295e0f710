from diff_filters import accept_fragment, skip_line
from diff_filters.filter_set import FilterSet
from diff_filters.lines import LinePair, pair_lines
from diff_filters.markup_fragments import MarkupFragment, iter_fragments
from dataclasses import dataclass, field
from pathlib import Path
import logging

ROOT = Path(__file__).resolve().parents[0]
PAIR_SEPARATOR = '|'

@dataclass
class PairReport:
    left_path : Path
    right_path : Path
    skipped : list[LinePair] = field(default_factory=list)  # changed lines dropped by skip filters
    silenced : list[LinePair] = field(default_factory=list)  # changed lines whose every difference was accepted
    pending : list[LinePair] = field(default_factory=list)  # changed lines that still count as mismatch
    accepted : list[MarkupFragment] = field(default_factory=list)  # differing fragments of the silenced lines

    @property
    def is_match(self) -> bool: return not self.pending

def run_pipeline(pairs_path: Path | None = None, filters: FilterSet | None = None) -> list[PairReport]:  # main pipeline runner (loops over pairs.txt)
    filters = filters if filters is not None else FilterSet.from_modules(accept_fragment, skip_line)
    reports: list[PairReport] = []
    for left_path, right_path in _get_pairs_to_process(pairs_path or ROOT / 'config' / 'pairs.txt'):
        left, right = _read(left_path), _read(right_path)
        report = PairReport(left_path, right_path)
        for line in pair_lines(left, right, changed_only=True):  # only lines that differ
            if filters.skip_line(line):
                report.skipped.append(line)
                continue
            differing = _get_differing_fragments(line)
            if differing and all(filters.accept_fragment(f) for f in differing):  # every difference accepted
                report.silenced.append(line)
                report.accepted.extend(differing)
            else: report.pending.append(line)
        _print_report(report)
        reports.append(report)
    return reports

def _get_differing_fragments(line: LinePair) -> list[MarkupFragment]:
    '''fragments present on one side of the line only: right-side ones first, then left-side ones'''
    def _key(f: MarkupFragment): return (f.text, f.attribute, f.element.tag)
    left, right = list(iter_fragments(line.left)), list(iter_fragments(line.right))
    left_keys, right_keys = {_key(f) for f in left}, {_key(f) for f in right}
    return [f for f in right if _key(f) not in left_keys] + [f for f in left if _key(f) not in right_keys]

def _get_pairs_to_process(pairs_path: Path) -> list[tuple[Path, Path]]:
    pairs: list[tuple[Path, Path]] = []
    with open(pairs_path, 'r', encoding='utf-8') as f:
        for i, ln in enumerate(f.read().split('\n'), start=1):
            ln = ln.strip()
            if not ln or ln.startswith('#'): continue  # skip empty lines and comments
            if PAIR_SEPARATOR not in ln: raise ValueError(f'{pairs_path}:{i}: expected "left | right", got "{ln}"')
            left, right = (p.strip() for p in ln.split(PAIR_SEPARATOR, 1))
            pairs.append((_resolve(left), _resolve(right)))
    return pairs

def _resolve(path: str) -> Path:
    p = Path(path)
    return p if p.is_absolute() else ROOT / p

def _read(path: Path) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()

def _print_report(report: PairReport):
    print(f'Compare: "{report.left_path.name}" <> "{report.right_path.name}"')
    for line in report.skipped: print(f'  Skipped: "{line.left.strip()}" -> "{line.right.strip()}"')
    for line in report.silenced: print(f'  Accepted: "{line.left.strip()}" -> "{line.right.strip()}"')
    print(f'  {"MATCH" if report.is_match else "MISMATCH"} ({len(report.pending)} pending line(s))')

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s | %(levelname)s | %(name)s | %(message)s')
    run_pipeline()
