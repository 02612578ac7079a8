import os
import sys
import click

from utils import load_config, load_series, setup_logger

try:
    from arburg.burg import burg_method, hierarchy_params
    from arburg.errors import ARBurgError
except ImportError:
    sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), os.pardir))
    from arburg.burg import burg_method, hierarchy_params
    from arburg.errors import ARBurgError


def format_values(values):
    return ' '.join('%f' % v for v in values)


@click.command()
@click.argument('datafile', type=click.Path(exists=True, dir_okay=False))
@click.option('--max_order', type=int, default=None, help='Max order of the AR model.')
@click.option('--subtract_mean/--retain_mean', default=None, help='Remove the sample mean before fitting.')
@click.option('--hierarchy/--final_only', default=None, help='Print every model up to the max order.')
@click.option('--exact', is_flag=True, help='Use exact rational arithmetic.')
@click.option('--inifile_path', default='config/arburg.ini', help='Filepath to a config file.')
@click.option('--verbose', is_flag=True, help='Log debug messages.')
def fit(datafile, max_order, subtract_mean, hierarchy, exact, inifile_path, verbose):
    config = load_config(inifile_path)
    max_order = config['max_order'] if max_order is None else max_order
    subtract_mean = config['subtract_mean'] if subtract_mean is None else subtract_mean
    hierarchy = config['hierarchy'] if hierarchy is None else hierarchy

    logger = setup_logger(config['logfile_path'], verbose)

    if max_order < 0:
        raise click.BadParameter('must be 0 or more', param_hint='--max_order')

    x = load_series(datafile, exact)

    try:
        res = burg_method(x, max_order, subtract_mean=subtract_mean, hierarchy=hierarchy)
    except ARBurgError as err:
        logger.error(err)
        raise click.ClickException(str(err))

    logger.info('Fitted %d points from %s up to order %d' % (res.n, datafile, res.maxorder))

    click.echo('[%s] N = %d, mean = %f, order = %d' % (datafile, res.n, res.mean, res.maxorder))
    if res.maxorder == 0:
        return

    if hierarchy:
        models = hierarchy_params(res.params, res.maxorder)
        orders = range(1, res.maxorder + 1)
    else:
        models = [res.params]
        orders = [res.maxorder]

    for k, a, sigma2e, gain in zip(orders, models, res.sigma2e, res.gain):
        click.echo('  AR(%d): a = [%s]' % (k, format_values(a)))
        click.echo('         sigma2e = %f, gain = %f' % (sigma2e, gain))

    click.echo('  autocor = [%s]' % format_values(res.autocor))


if __name__ == '__main__':
    fit()
