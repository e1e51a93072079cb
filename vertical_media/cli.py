import click
import json
import sys
from typing import List

from .config.settings import settings
from .enrichment.oembed import OEmbedClient
from .utils.logging import setup_logging
from .utils.url_parser import URLParser
from .utils.validators import URLValidator

PLATFORM_CHOICES = list(URLParser.supported_platforms().keys())


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose: bool):
    """Vertical video URL recognition CLI"""
    setup_logging('DEBUG' if verbose else settings.log_level, settings.log_file)


@cli.command()
@click.argument('url')
@click.option('--platform', '-p', default='auto', type=click.Choice(PLATFORM_CHOICES), help='Platform hint')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
@click.option('--oembed', is_flag=True, help='Fetch oEmbed data when the platform offers it')
def parse(url: str, platform: str, as_json: bool, oembed: bool):
    """Recognise a video URL and print its embed reference"""
    result = URLParser.parse(url, platform)

    if not result.ok:
        if as_json:
            click.echo(json.dumps({'reason': result.reason.value, 'message': result.message}))
        else:
            click.echo(f"❌ {result.message}: {url}", err=True)
        sys.exit(1)

    data = result.to_dict()
    data['element_id'] = result.element_id()

    if oembed:
        if settings.oembed_enabled:
            data['oembed'] = OEmbedClient(timeout=settings.oembed_timeout).enrich(result)
        else:
            click.echo("Warning: oEmbed enrichment is disabled", err=True)

    if as_json:
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"✅ {result.platform.value} video")
    click.echo(f"   Video ID:  {result.video_id}")
    click.echo(f"   Embed URL: {result.embed_url}")
    click.echo(f"   Element:   {data['element_id']}")
    if data.get('oembed'):
        click.echo(f"   oEmbed:    {data['oembed'].get('title', 'available')}")


@cli.command()
@click.argument('video_id')
@click.option('--platform', '-p', required=True, type=click.Choice(PLATFORM_CHOICES[1:]), help='Platform the ID belongs to')
def validate(video_id: str, platform: str):
    """Check a video ID has the expected shape for a platform"""
    if URLValidator.is_valid_id(video_id, platform):
        click.echo(f"✅ Valid {platform} video ID")
    else:
        click.echo(f"❌ Invalid {platform} video ID: {video_id}")
        sys.exit(1)


@cli.command()
@click.argument('urls', nargs=-1, required=True)
def batch(urls: List[str]):
    """Recognise several URLs and group them by platform"""
    result = URLValidator.validate_batch_urls(list(urls))

    for platform, references in result['valid'].items():
        click.echo(f"{platform} ({len(references)}):")
        for reference in references:
            click.echo(f"  {reference.video_id}  {reference.embed_url}")

    if result['unsupported']:
        click.echo(f"unsupported ({len(result['unsupported'])}):")
        for url in result['unsupported']:
            click.echo(f"  {url}")

    if result['invalid']:
        click.echo(f"invalid ({len(result['invalid'])}):")
        for url in result['invalid']:
            click.echo(f"  {url}")


@cli.command()
def platforms():
    """List supported platform hints"""
    for key, label in URLParser.supported_platforms().items():
        click.echo(f"  {key:<10} {label}")


@cli.command()
def config():
    """Show current configuration"""
    click.echo("Current Configuration:")
    for key, value in settings.as_dict().items():
        click.echo(f"  {key}: {value}")


if __name__ == '__main__':
    cli()
