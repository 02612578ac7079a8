import os
import sys
import click

from utils import load_config, load_series, setup_logger

try:
    from arburg.ar_1d import ModelSelection
    from arburg.errors import ARBurgError
except ImportError:
    sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), os.pardir))
    from arburg.ar_1d import ModelSelection
    from arburg.errors import ARBurgError


@click.command()
@click.argument('datafiles', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--max_k', type=int, default=None, help='Max number of k for AR(k).')
@click.option('--criterion', type=click.Choice(ModelSelection.criteria), default=None,
              help='Order selection criterion.')
@click.option('--subtract_mean/--retain_mean', default=None, help='Remove the sample mean before fitting.')
@click.option('--inifile_path', default='config/arburg.ini', help='Filepath to a config file.')
@click.option('--verbose', is_flag=True, help='Log debug messages.')
def cli(datafiles, max_k, criterion, subtract_mean, inifile_path, verbose):
    config = load_config(inifile_path)
    max_k = config['max_order'] if max_k is None else max_k
    criterion = config['criterion'] if criterion is None else criterion
    subtract_mean = config['subtract_mean'] if subtract_mean is None else subtract_mean

    logger = setup_logger(config['logfile_path'], verbose)

    assert max_k > 0, 'max_k must be 1 or more'

    try:
        selector = ModelSelection(max_k, criterion, subtract_mean)
    except ValueError as err:
        raise click.BadParameter(str(err), param_hint='criterion')

    for datafile in datafiles:
        x = load_series(datafile)

        try:
            selected_k, min_score = selector.select(x)
        except ARBurgError as err:
            logger.error('[%s] %s' % (datafile, err))
            raise click.ClickException('[%s] %s' % (datafile, err))

        click.echo('[%s]\n  k = %d (%s = %f)' % (datafile, selected_k, criterion.upper(), min_score))


if __name__ == '__main__':
    cli()
