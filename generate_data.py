import os
import random
from datetime import date, timedelta

import pandas as pd

# --- Generator settings ---
NUM_DAYS = 7            # days starting today
MOVEMENTS_PER_DAY = (8, 16)
DOUBLE_BOOKING_PROB = 0.15   # share of aircraft-days that get an overlapping second movement
OUTPUT_PATH = os.path.join('data', 'movements.csv')

HOME_BASE = 'SBSP'

# Regional airports (ICAO: city)
airports = {
    'SBGR': 'Guarulhos', 'SBKP': 'Campinas', 'SBRJ': 'Rio de Janeiro (Santos Dumont)',
    'SBGL': 'Rio de Janeiro (Galeão)', 'SBBR': 'Brasília', 'SBCF': 'Confins',
    'SBPA': 'Porto Alegre', 'SBCT': 'Curitiba', 'SBFL': 'Florianópolis',
    'SBSV': 'Salvador', 'SBRF': 'Recife', 'SBJD': 'Jundiaí', 'SDCO': 'Sorocaba',
}

# Fleet served by the base: prefix -> model
fleet = {
    'PT-ABC': 'Cessna Citation CJ3', 'PR-XYZ': 'Embraer Phenom 300', 'PP-LMN': 'King Air 350',
    'PS-JET': 'Embraer Legacy 500', 'PR-FLY': 'Pilatus PC-12', 'PT-OPS': 'Learjet 45',
    'PR-HEL': 'Airbus H125', 'PP-AER': 'Cessna Caravan', 'PS-BIZ': 'Gulfstream G450',
    'PR-SKY': 'Embraer Phenom 100',
}

statuses = ['scheduled', 'arrived', 'departed', 'delayed', 'cancelled']
status_weights = [0.55, 0.15, 0.15, 0.1, 0.05]


def clock(hours_float):
    minutes_total = int(round(hours_float * 60)) % (24 * 60)
    return f"{minutes_total // 60:02d}:{minutes_total % 60:02d}"


def make_movement(movement_id, prefix, day, arrival_hour, ground_hours):
    """Arrival at the base followed by a departure after `ground_hours`; one side may be missing."""
    other = random.choice(list(airports.keys()))
    departure_hour = arrival_hour + ground_hours
    departure_day = day + timedelta(days=1) if departure_hour >= 24 else day

    record = {
        'id': f"MV{movement_id:05d}",
        'aircraft_prefix': prefix,
        'aircraft_model': fleet[prefix],
        'origin': other,
        'destination': random.choice(list(airports.keys())),
        'arrival_date': day.strftime('%Y-%m-%d'),
        'arrival_time': clock(arrival_hour),
        'departure_date': departure_day.strftime('%Y-%m-%d'),
        'departure_time': clock(departure_hour),
        'status': random.choices(statuses, weights=status_weights)[0],
    }

    shape = random.random()
    if shape < 0.1:     # departure only (aircraft based overnight)
        record['arrival_date'] = ''
        record['arrival_time'] = ''
        record['origin'] = HOME_BASE
    elif shape < 0.2:   # arrival only (staying)
        record['departure_date'] = ''
        record['departure_time'] = ''
        record['destination'] = HOME_BASE
    return record


movement_records = []
start_date = date.today()
next_id = 1

for day_offset in range(NUM_DAYS):
    current_day = start_date + timedelta(days=day_offset)
    n_movements = random.randint(*MOVEMENTS_PER_DAY)
    prefixes = random.sample(list(fleet.keys()), k=min(len(fleet), n_movements))

    for prefix in prefixes:
        arrival_hour = random.randint(5 * 4, 21 * 4) / 4   # quarter-hour slots 05:00-21:00
        ground_hours = random.choice([0.75, 1, 1.5, 2, 3, 4])
        movement_records.append(make_movement(next_id, prefix, current_day, arrival_hour, ground_hours))
        next_id += 1

        # Double booking: second movement starting before the first one leaves
        if random.random() < DOUBLE_BOOKING_PROB:
            overlap_arrival = arrival_hour + ground_hours / 2
            if overlap_arrival < 23:
                movement_records.append(make_movement(next_id, prefix, current_day, overlap_arrival, 1))
                next_id += 1

movements_df = pd.DataFrame(movement_records)

os.makedirs(os.path.dirname(OUTPUT_PATH), exist_ok=True)
movements_df.to_csv(OUTPUT_PATH, index=False)

print(f"Gerado {OUTPUT_PATH} com {len(movements_df)} movimentos em {NUM_DAYS} dias.")
