import pytest

from atc_airspace.parsers.context import ParseContext


@pytest.fixture
def ctx() -> ParseContext:
    """Return a fresh parse context in DMS mode."""
    return ParseContext()


@pytest.fixture
def decimal_ctx() -> ParseContext:
    """Return a fresh parse context accepting decimal degrees."""
    return ParseContext(decimal_degrees=True)


@pytest.fixture
def minimal_table() -> dict:
    """Return the smallest valid airspace table: one airport, one runway, one SID, one airline, one entry point."""
    return {
        'airspace': {
            'name': 'London, London',
            'automatic': True,
            'beacons': [
                'OCK, 512018N, 0002659W, 0, Ockham',
                'BIG, 511950N, 0000210E, -302, Biggin',
            ],
            'radius': 40,
            'center': '512839N, 0002741W',
            'descentaltitude': 7000,
            'diversionaltitude': 6000,
            'elevation': 83,
            'floor': 2000,
            'separation': 3,
            'metric': False,
            'strictspawn': True,
            'usa': False,
            'inches': False,
            'speedrestriction': '0, 300, 10000, 250',
            'localizerspeed': '4, 160',
            'letters': 2,
            'transitionaltitude': 6000,
            'magneticvar': 1.5,
            'zoom': 7,
        },
        'airport1': {
            'name': 'Heathrow, Heathrow',
            'code': 'EGLL',
            'runways': ['27L, 27L, 512839.63N, 0002559.82W, 270, 12799'],
            'climbaltitude': 6000,
            'sids': ['OCK'],
            'airlines': ['BAW, 10, A320/B772, Speedbird, NESW'],
            'entrypoints': ['90, BIG, 8000'],
        },
    }


@pytest.fixture
def full_table(minimal_table) -> dict:
    """Return a table exercising every section type."""
    table = minimal_table
    table['airspace']['line1'] = ['255, 0, 0', '512000N, 0002000W', '512000N, 0001000W']
    table['airport2'] = {
        'name': 'Northolt, Northolt',
        'code': 'NH',
        'runways': ['25, 25, 513311N, 0002457W, 250, 5525'],
        'climbaltitude': 3000,
        'flow': 4,
        'inboundbeacon': 'OCK',
        'entrypoints': ['0'],
        'airlines': ['RRR, 1, C130'],
    }
    table['area1'] = {
        'shape': 'circle',
        'altitude': 2500,
        'position': '512839N, 0002741W',
        'radius': 5,
        'drawdegrees': '90, 270',
    }
    table['area2'] = {
        'shape': 'polygon',
        'altitude': 3000,
        'name': 'North',
        'points': ['513000N, 0003000W', '513000N, 0002000W', '512500N, 0002500W'],
        'draw': 1,
    }
    table['configurations'] = {
        'config1': ['1, 27L, land start', '0.5, 27L, rev, start, 280'],
    }
    table['departure1'] = {
        'runway': '27L',
        'route1': ['BPK7F, Brookmans Park seven foxtrot', '512830N, 0003000W, 6000', '513000N, 0003500W'],
    }
    table['approach1'] = {
        'runway': '27L',
        'beacon': 'BIG',
        'route1': ['270, BIG1A, Biggin one alpha', '512000N, 0001000E, 7000, 220', '10, 3000, 180'],
    }
    table['approach2'] = {
        'runway': '27L',
        'beacon': 'OCK',
        'route1': ['0, OCK1A', '512018N, 0002659W', 'end, hold'],
    }
    table['approach3'] = {
        'runway': '27L, rev',
        'beacon': 'BIG',
        'route1': ['90, BIG1B', '512000N, 0001000E', 'end'],
    }
    table['planetypes'] = {
        'types': ['A320, 4, 140, 250, 2.8, 3.2, 1200, 1800, 130, 145, 1.0, 1.5, Airbus'],
    }
    table['background'] = {
        'line1': ['coast', '512000N, 0003000W', '513000N, 0003000W'],
    }
    return table
