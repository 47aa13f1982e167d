import json
from pathlib import Path

import typer
from pydantic import TypeAdapter, ValidationError

from wingo.config import MODES
from wingo.core.models import OutcomeRecord
from wingo.core.sequence import InsufficientData
from wingo.services import accuracy, forecast, get_patterns, get_stats, make_rng, replay_history


app = typer.Typer(help="Forecast the next Wingo outcome from a JSON file of records.")
_records = TypeAdapter(list[OutcomeRecord])


def _load(path: Path) -> list[OutcomeRecord]:
    try:
        return _records.validate_json(path.read_bytes())
    except (OSError, ValidationError) as e:
        typer.echo(f"cannot read records from {path}: {e}", err=True)
        raise typer.Exit(code=2)


def _check_mode(mode: str) -> str:
    if mode not in MODES:
        raise typer.BadParameter(f"expected one of {', '.join(sorted(MODES))}")
    return mode


def _emit(obj):
    typer.echo(json.dumps(obj, indent=2, default=str))


@app.command()
def predict(path: Path, mode: str = typer.Option("model_1", callback=_check_mode),
            seed: int = typer.Option(None), history: bool = typer.Option(True)):
    out = forecast(_load(path), mode=mode, rng=make_rng(seed), with_history=history)
    _emit(out.model_dump(by_alias=True))
    if not out.success:
        raise typer.Exit(code=1)


@app.command()
def replay(path: Path, mode: str = typer.Option("model_1", callback=_check_mode),
           seed: int = typer.Option(None), last: int = 20):
    items = replay_history(_load(path), mode=mode, rng=make_rng(seed), last=last)
    _emit({
        'items': [x.model_dump(by_alias=True) for x in items],
        'accuracy': accuracy(items).model_dump(by_alias=True),
    })


@app.command()
def patterns(path: Path, min_run: int = 3):
    try:
        _emit(get_patterns(_load(path), min_run=min_run))
    except InsufficientData as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command()
def stats(path: Path):
    _emit(get_stats(_load(path)))


if __name__ == "__main__":
    app()
