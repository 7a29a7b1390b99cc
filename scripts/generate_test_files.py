import os
import json
import shutil
import random
from faker import Faker

from wbox_codec import compress

fake = Faker()

def create_random_name():
    """Generate a random file name using Faker."""
    return fake.unique.word()

def create_random_record():
    """Generate one record with a mix of JSON value types."""
    return {
        "id": fake.uuid4(),
        "name": fake.name(),
        "city": fake.city(),
        "text": fake.text(max_nb_chars=200),
        "score": round(random.uniform(0, 100), 2),
        "count": random.randint(0, 1000),
        "active": fake.boolean(),
        "tags": fake.words(nb=random.randint(0, 4)),
        "parent": None,
    }

def create_random_document(num_records=5):
    """Generate a JSON-serializable document with random content."""
    return {
        "version": random.randint(1, 5),
        "title": fake.sentence(),
        "records": [create_random_record() for _ in range(num_records)],
    }

def create_sample_files(directory, num_files):
    """Write num_files documents into directory, each as a .json file and as a compressed .wbox file."""
    paths = []
    for _ in range(num_files):
        name = create_random_name()
        text = json.dumps(create_random_document(random.randint(1, 10)), indent=2, ensure_ascii=False)

        json_path = os.path.join(directory, name + ".json")
        with open(json_path, 'w', encoding='utf-8') as f:
            f.write(text)

        wbox_path = os.path.join(directory, name + ".wbox")
        with open(wbox_path, 'wb') as f:
            f.write(compress(text))

        paths.extend([json_path, wbox_path])
    return paths

if __name__ == "__main__":
    base_path = "test_files"  # Directory to write the sample files to
    num_files = 10  # Number of .json/.wbox pairs to create

    # Delete the directory if it exists
    if os.path.exists(base_path):
        shutil.rmtree(base_path)

    # Ensure the base directory exists
    os.makedirs(base_path, exist_ok=True)

    create_sample_files(base_path, num_files)

    print(f"{num_files} sample .json/.wbox pairs created in '{base_path}'")
