# multisort

`multisort` reads whole numbers from several text files and sorts them
in parallel worker threads. It then merges the sorted runs into a single
output file, with one number per line.

## Installation

```
pip install .
```

## Usage

```
multisort NUM_THREADS INPUT_FILE [INPUT_FILE ...] IGNORED OUTPUT_FILE
```

At least four arguments are required.

- `NUM_THREADS` is how many worker threads to use. The command reads the
  leading integer of this argument, so `4x` counts as 4 and text with no
  leading integer counts as 0. The value must be positive.
  - If it is larger than the number of input files, only as many threads
    as there are files are started.
  - The remaining threads are reported as not having run.
- Every argument between `NUM_THREADS` and the last two arguments is an
  input file. The argument just before `OUTPUT_FILE` is not read at all.
- Input files are dealt out to the threads in turn: the first file to
  thread 0, the second to thread 1, and so on, wrapping around.
- Each input file holds integers separated by whitespace. Reading stops
  at the first token that does not start with an integer.
- A file that cannot be opened is reported on standard error as
  `Error opening file NAME` and skipped.
- `OUTPUT_FILE` receives every value from every input in ascending
  order, one per line.

Example: five input files sorted by four threads into `sorted.dat`.
`-` fills the ignored position.

```
multisort 4 a.dat b.dat c.dat d.dat e.dat - sorted.dat
```

When it finishes, the command prints each thread's running time, for
example:

```
Thread 0 execution time: 0.000123456 seconds.
```

It then prints the total running time. The exit status is 0 on success.

It exits with status 1 and prints a message in these cases:

- there are too few arguments;
- the thread count is not positive;
- the output file cannot be opened (`Error opening output file`).

## Library use

- `multisort.quicksort.sort_in_place(values)` sorts a mutable sequence in
  place.
- `quicksort(values, low, high)` sorts the inclusive range from `low` to
  `high`. It uses `partition(values, low, high)`, which partitions around
  the first element as pivot.
- `multisort.worker.read_integers(path)` returns the integers read from a
  file.
- `multisort.worker.WorkerTask(files=[...])` reads and sorts one share of
  the files.
  - `run()` returns the sorted values.
  - After it returns, `values`, `total_values`, `elapsed` (seconds) and
    `failed` (files that could not be opened) are filled in.
- `multisort.merge.merge_sorted(runs)` merges already sorted iterables
  into one sorted list. On equal values, the element from the earlier
  run comes first.
- `multisort.cli.distribute_files(files, num_workers)` returns the
  round-robin batches of files. A non-positive `num_workers` raises
  `multisort.cli.UsageError`.
- `multisort.cli.sort_files(files, num_workers)` does the whole job. It
  returns the merged values and the `WorkerTask` objects that ran.
- `multisort.cli.write_values(path, values)` writes values one per line.
- `multisort.cli.main(argv=None)` runs the command and returns its exit
  status.